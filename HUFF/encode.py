import argparse
import os
from codec import compress_file, configure_logging
from metrics import compression_ratio, bits_per_byte

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .hf")
    ap.add_argument("--debug", action="store_true", help="log codec internals")
    args = ap.parse_args(argv)

    configure_logging(args.debug)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as src, open(args.output, "wb") as dst:
        st = compress_file(src, dst)

    print(f"[encode] wrote {args.output}")
    print(f"[encode] in={st.bytes_in}B out={st.bytes_out}B header={st.header_bits}b data={st.data_bits}b")
    print(f"[encode] ratio={compression_ratio(st.bytes_in, st.bytes_out):.3f} "
          f"bits/byte={bits_per_byte(st.bytes_in, st.bytes_out):.3f}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
