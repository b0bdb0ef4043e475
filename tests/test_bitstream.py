import pytest

from bitpack import BitWriter, BitReader
from bitstream import (HUFF_TREE, write_magic, read_magic, write_tree, read_tree,
                       HuffError, FormatError, TruncatedHeaderError)
from huffman import PSEUDO_EOF, count_weights, build_tree
from samples import text_bytes


def same_shape(a, b):
    if a.is_leaf() or b.is_leaf():
        return a.is_leaf() and b.is_leaf() and a.symbol == b.symbol
    return same_shape(a.left, b.left) and same_shape(a.right, b.right)


def test_magic_value():
    assert HUFF_TREE == 0xFACE8201
    bw = BitWriter()
    write_magic(bw)
    br = BitReader(bw.finish())
    assert read_magic(br) == HUFF_TREE


def test_bad_magic():
    with pytest.raises(FormatError):
        read_magic(BitReader(b"\xfa\xce\x82\x00"))


def test_short_magic():
    with pytest.raises(TruncatedHeaderError):
        read_magic(BitReader(b"\xfa\xce"))


@pytest.mark.parametrize("data", [b"", b"zzzz", bytes(range(256)), text_bytes(2000)])
def test_header_reparses_to_same_tree(data):
    root = build_tree(count_weights(data))
    bw = BitWriter()
    write_tree(root, bw)
    nbits = bw.bits_written
    br = BitReader(bw.finish())
    back = read_tree(br)
    assert same_shape(root, back)
    assert br.bits_read == nbits


def test_single_leaf_header_layout():
    bw = BitWriter()
    write_tree(build_tree(count_weights(b"")), bw)
    assert bw.bits_written == 10
    assert bw.finish() == bytes([0b11000000, 0b00000000])


def test_read_tree_leaf_weight_is_zero():
    bw = BitWriter()
    write_tree(build_tree(count_weights(b"abc")), bw)
    back = read_tree(BitReader(bw.finish()))
    stack = [back]
    while stack:
        n = stack.pop()
        assert n.weight == 0
        if not n.is_leaf():
            stack += [n.left, n.right]


def test_truncated_marker_bit():
    with pytest.raises(TruncatedHeaderError):
        read_tree(BitReader(b""))


def test_truncated_symbol_field():
    bw = BitWriter()
    bw.write_bits(1, 1)
    bw.write_bits(4, 0)
    # 5 bits + 3 pad bits: only 7 of the 9 symbol bits exist
    with pytest.raises(TruncatedHeaderError):
        read_tree(BitReader(bw.finish()))


def test_symbol_out_of_range():
    bw = BitWriter()
    bw.write_bits(1, 1)
    bw.write_bits(9, PSEUDO_EOF + 1)
    with pytest.raises(FormatError):
        read_tree(BitReader(bw.finish()))


def test_endless_internal_markers():
    with pytest.raises(FormatError):
        read_tree(BitReader(b"\x00" * 64))


def test_errors_are_value_errors():
    for cls in (FormatError, TruncatedHeaderError):
        assert issubclass(cls, HuffError)
        assert issubclass(cls, ValueError)
