import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from bitpack import BitWriter, BitReader
from huffman import Node, PSEUDO_EOF, count_weights, build_tree, build_codebook
from bitstream import (write_magic, read_magic, write_tree, read_tree,
                       FormatError, TruncatedDataError)

logger = logging.getLogger(__name__)

@dataclass
class CodecStats:
    bytes_in: int
    bytes_out: int
    header_bits: int
    data_bits: int

def configure_logging(debug: bool = False):
    """
    Root logging for the CLIs. --debug wins over HUFF_LOG_LEVEL.
    """
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("HUFF_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

def encode_symbols(codes: List[Optional[str]], data, bw: BitWriter) -> int:
    """Emit the code of every input byte, then the sentinel code. Returns bits written."""
    start = bw.bits_written
    for b in data:
        bw.write_code(codes[b])
    bw.write_code(codes[PSEUDO_EOF])
    return bw.bits_written - start

def decode_symbols(root: Node, br: BitReader) -> bytes:
    out = bytearray()
    if root.is_leaf():
        # only the sentinel: empty input, no data bits
        if root.symbol != PSEUDO_EOF:
            raise FormatError("Malformed stream: single-leaf tree without sentinel")
        return bytes(out)
    cur = root
    while True:
        bit = br.read_bit()
        if bit is None:
            raise TruncatedDataError("Malformed stream: data ended before sentinel")
        cur = cur.right if bit else cur.left
        if cur.is_leaf():
            if cur.symbol == PSEUDO_EOF:
                break
            out.append(cur.symbol)
            cur = root
    return bytes(out)

def _compress(data):
    view = memoryview(data).cast("B")
    weights = count_weights(view)
    root = build_tree(weights)
    codes = build_codebook(root)

    bw = BitWriter()
    write_magic(bw)
    write_tree(root, bw)
    header_bits = bw.bits_written
    data_bits = encode_symbols(codes, view, bw)
    payload = bw.finish()
    logger.debug("compressed %d bytes: header=%d bits, data=%d bits, out=%d bytes",
                 len(view), header_bits, data_bits, len(payload))
    return payload, CodecStats(len(view), len(payload), header_bits, data_bits)

def _decompress(payload):
    br = BitReader(payload)
    read_magic(br)
    root = read_tree(br)
    header_bits = br.bits_read
    out = decode_symbols(root, br)
    data_bits = br.bits_read - header_bits
    logger.debug("decompressed %d bytes: header=%d bits, data=%d bits, out=%d bytes",
                 len(br.data), header_bits, data_bits, len(out))
    return out, CodecStats(len(br.data), len(out), header_bits, data_bits)

def compress(data) -> bytes:
    """
    Compress a bytes-like object.
    Returns: magic + tree header + data codes, zero-padded to a byte boundary.
    """
    return _compress(data)[0]

def decompress(payload) -> bytes:
    """
    Reverse compress().
    Raises FormatError / TruncatedHeaderError / TruncatedDataError on a bad stream.
    """
    return _decompress(payload)[0]

def compress_file(src, dst) -> CodecStats:
    """src, dst: binary file objects. Nothing is written to dst on failure."""
    payload, stats = _compress(src.read())
    dst.write(payload)
    return stats

def decompress_file(src, dst) -> CodecStats:
    out, stats = _decompress(src.read())
    dst.write(out)
    return stats
