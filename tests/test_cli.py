import encode
import decode
import plot_codes
from samples import save_sample, text_bytes


def test_encode_decode_roundtrip(tmp_path, capsys):
    src = save_sample(tmp_path / "in.txt", kind="text", n=5000, seed=1)
    hf = tmp_path / "out" / "in.hf"
    back = tmp_path / "out" / "in.txt"

    assert encode.main(["--input", str(src), "--output", str(hf)]) == 0
    assert hf.stat().st_size < 5000
    assert decode.main(["--input", str(hf), "--output", str(back), "--debug"]) == 0
    assert back.read_bytes() == src.read_bytes()

    out = capsys.readouterr().out
    assert "[encode] wrote" in out
    assert "ratio=" in out
    assert "[decode] wrote" in out


def test_encode_empty_file(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    hf = tmp_path / "empty.hf"
    back = tmp_path / "empty.out"
    assert encode.main(["--input", str(src), "--output", str(hf)]) == 0
    assert decode.main(["--input", str(hf), "--output", str(back)]) == 0
    assert back.read_bytes() == b""


def test_decode_bad_magic(tmp_path, capsys):
    bad = tmp_path / "bad.hf"
    bad.write_bytes(b"\x00" * 32)
    dst = tmp_path / "never"
    assert decode.main(["--input", str(bad), "--output", str(dst)]) == 1
    assert not dst.exists()
    assert "Bad magic" in capsys.readouterr().err


def test_plot_code_lengths(tmp_path):
    png = plot_codes.plot_code_lengths(text_bytes(2000, seed=2), str(tmp_path / "fig" / "codes.png"))
    with open(png, "rb") as f:
        assert f.read(8) == b"\x89PNG\r\n\x1a\n"


def test_plot_main(tmp_path, capsys):
    src = save_sample(tmp_path / "in.bin", kind="skewed", n=2000)
    png = tmp_path / "codes.png"
    assert plot_codes.main(["--input", str(src), "--output", str(png)]) == 0
    assert png.exists()
    assert "[plot] wrote" in capsys.readouterr().out
