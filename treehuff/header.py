"""
Preorder tree header.

An internal node is written as a single 0 bit followed by its left and right
subtrees; a leaf is a 1 bit followed by its symbol in SYMBOL_BITS bits. The
encoding delimits itself, the reader stops exactly where the writer stopped.
"""

from .errors import CorruptHeaderError, TruncatedStreamError
from .tree import BITS_PER_WORD, PSEUDO_EOF, Internal, Leaf

SYMBOL_BITS = BITS_PER_WORD + 1 # room for PSEUDO_EOF next to 0-255


def write_header(root, bit_output) -> None:
    if root.is_leaf:
        bit_output.write_bits(1, 1)
        bit_output.write_bits(SYMBOL_BITS, root.symbol)
        return
    bit_output.write_bits(1, 0)
    write_header(root.left, bit_output)
    write_header(root.right, bit_output)


def read_tree_header(bit_input, depth=0):
    """
    Rebuilds a tree written by write_header. Weights are not stored, every
    node comes back with weight 0.

    Parameters:
    bit_input (BitInputStream): Stream positioned at the first header bit.

    Returns:
    Leaf | Internal: Root of the rebuilt tree.
    """
    if depth > PSEUDO_EOF:
        # 257 leaves never need a longer path
        raise CorruptHeaderError("tree header nests deeper than any valid tree")
    bit = bit_input.read_bits(1)
    if bit == -1:
        raise TruncatedStreamError("input ended inside the tree header")
    if bit == 0:
        left = read_tree_header(bit_input, depth + 1)
        right = read_tree_header(bit_input, depth + 1)
        return Internal(left, right, weight=0)

    symbol = bit_input.read_bits(SYMBOL_BITS)
    if symbol == -1:
        raise TruncatedStreamError("input ended inside a header leaf")
    if symbol > PSEUDO_EOF:
        raise CorruptHeaderError(f"header leaf holds invalid symbol {symbol}")
    return Leaf(symbol)
