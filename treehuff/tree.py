import heapq
from itertools import count

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE # end-of-stream symbol, one past the last byte value


class Leaf: # Node holding one symbol
    __slots__ = ("symbol", "weight")
    is_leaf = True

    def __init__(self, symbol: int, weight: int = 0):
        self.symbol = symbol
        self.weight = weight

    def __repr__(self):
        return f"Leaf({self.symbol}, {self.weight})"


class Internal: # Node with exactly two children
    __slots__ = ("weight", "left", "right")
    is_leaf = False

    def __init__(self, left, right, weight: int = None):
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight if weight is None else weight

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


def make_tree_from_counts(counts, on_leaf=None):
    """
    Builds the Huffman tree for a count vector indexed by symbol.

    Leaves are pushed in ascending symbol order and every heap entry carries
    an insertion sequence number, so nodes of equal weight leave the heap in
    the order they entered it. The first node popped becomes the left child.

    Parameters:
    counts (Sequence[int]): Count per symbol, zero counts are skipped.
    on_leaf (callable, optional): Called with (symbol, count) for each leaf.

    Returns:
    Leaf | Internal: Root of the tree. A single nonzero count gives a leaf root.
    """
    seq = count()
    priority_queue = []
    for symbol, weight in enumerate(counts):
        if weight > 0:
            if on_leaf is not None:
                on_leaf(symbol, weight)
            priority_queue.append((weight, next(seq), Leaf(symbol, weight)))
    if not priority_queue:
        raise ValueError("Cannot build a tree without any nonzero count")
    heapq.heapify(priority_queue) # already ordered, keys are unique

    while len(priority_queue) > 1:
        _, _, left = heapq.heappop(priority_queue)
        _, _, right = heapq.heappop(priority_queue)
        merged = Internal(left, right)
        heapq.heappush(priority_queue, (merged.weight, next(seq), merged))

    return priority_queue[0][2]


def leaf_count(root) -> int:
    if root.is_leaf:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)
