from huffman import Node, BITS_PER_WORD, PSEUDO_EOF

BITS_PER_INT = 32
SYMBOL_BITS = BITS_PER_WORD + 1  # holds 0..256

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1  # magic: tree header follows

# Stream layout (MSB-first):
# magic(32) tree(preorder: leaf = 1 + sym(9), internal = 0 + left + right)
# data(codes..., sentinel code) pad(0..7 zero bits)

class HuffError(ValueError):
    """Malformed or truncated compressed stream."""

class FormatError(HuffError):
    pass

class TruncatedHeaderError(HuffError):
    pass

class TruncatedDataError(HuffError):
    pass

def write_magic(bw):
    bw.write_bits(BITS_PER_INT, HUFF_TREE)

def read_magic(br):
    magic = br.read_bits(BITS_PER_INT)
    if magic is None:
        raise TruncatedHeaderError("Malformed stream: magic truncated")
    if magic != HUFF_TREE:
        raise FormatError(f"Bad magic number: {magic:#010x}")
    return magic

def write_tree(node: Node, bw):
    if node.is_leaf():
        bw.write_bits(1, 1)
        bw.write_bits(SYMBOL_BITS, node.symbol)
    else:
        bw.write_bits(1, 0)
        write_tree(node.left, bw)
        write_tree(node.right, bw)

def read_tree(br, depth: int = 0) -> Node:
    # a tree over 257 symbols is at most 256 levels deep
    if depth > PSEUDO_EOF:
        raise FormatError("Malformed stream: tree header too deep")
    bit = br.read_bit()
    if bit is None:
        raise TruncatedHeaderError("Malformed stream: tree header truncated")
    if bit == 1:
        sym = br.read_bits(SYMBOL_BITS)
        if sym is None:
            raise TruncatedHeaderError("Malformed stream: leaf symbol truncated")
        if sym > PSEUDO_EOF:
            raise FormatError(f"Leaf symbol out of range: {sym}")
        return Node(symbol=sym, weight=0)
    left = read_tree(br, depth + 1)
    right = read_tree(br, depth + 1)
    return Node(weight=0, left=left, right=right)
