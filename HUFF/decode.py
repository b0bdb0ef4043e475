import argparse
import io
import os
import sys
from codec import decompress_file, configure_logging
from bitstream import HuffError

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .hf")
    ap.add_argument("--output", required=True, help="path to decompressed file")
    ap.add_argument("--debug", action="store_true", help="log codec internals")
    args = ap.parse_args(argv)

    configure_logging(args.debug)

    # decode fully before touching the output path
    buf = io.BytesIO()
    with open(args.input, "rb") as src:
        try:
            st = decompress_file(src, buf)
        except HuffError as e:
            print(f"[decode] {args.input}: {e}", file=sys.stderr)
            return 1

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as dst:
        dst.write(buf.getvalue())

    print(f"[decode] wrote {args.output}")
    print(f"[decode] in={st.bytes_in}B out={st.bytes_out}B header={st.header_bits}b data={st.data_bits}b")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
