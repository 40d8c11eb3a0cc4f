class HuffError(Exception):
    """Base class for everything the codec raises."""


class FormatError(HuffError):
    # Stream does not start with the tree-header magic number
    pass


class TruncatedStreamError(HuffError):
    # Input ran out while header or payload bits were still required
    pass


class CorruptHeaderError(HuffError):
    # Header parsed but describes a tree that cannot drive decoding
    pass


class BitStreamError(HuffError):
    pass
