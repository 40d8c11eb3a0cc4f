from typing import Dict, NamedTuple


class Code(NamedTuple):
    bits: int # root-to-leaf path, first step in the most significant bit
    length: int

    def __str__(self):
        return format(self.bits, f"0{self.length}b") if self.length else ""

    def startswith(self, other: "Code") -> bool:
        if other.length > self.length:
            return False
        return self.bits >> (self.length - other.length) == other.bits


def make_codings_from_tree(root) -> Dict[int, Code]: # root: root of the Huffman tree
    codes = {}

    def walk(node, bits, length):
        if node.is_leaf:
            codes[node.symbol] = Code(bits, length)
            return
        walk(node.left, bits << 1, length + 1)
        walk(node.right, (bits << 1) | 1, length + 1)

    # a leaf root (empty input) gets the zero-length code
    walk(root, 0, 0)
    return codes
