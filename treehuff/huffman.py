import logging

from .codes import make_codings_from_tree
from .errors import CorruptHeaderError, FormatError, TruncatedStreamError
from .frequency import read_for_counts
from .header import read_tree_header, write_header
from .tree import BITS_PER_WORD, PSEUDO_EOF, leaf_count, make_tree_from_counts

BITS_PER_INT = 32
HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1 # variant flag: header is a preorder tree

DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffProcessor:
    def __init__(self, debug: int = 0, logger: logging.Logger = None):
        """
        Initializes the processor.

        Parameters:
        debug (int): Trace level, DEBUG_LOW for per-call totals, DEBUG_HIGH
            adds per-symbol counts and codes.
        logger (logging.Logger, optional): Destination for the trace,
            defaults to this module's logger.
        """
        self.debug = debug
        self.log = logger if logger is not None else logging.getLogger(__name__)

    def _trace(self, level, msg, *args):
        if self.debug >= level:
            self.log.debug(msg, *args)

    def compress(self, bit_input, bit_output) -> None:
        """
        Compresses bit_input into bit_output. The input is read twice, once
        to count and once to encode, so it must support reset(). bit_output
        is closed on return.

        Parameters:
        bit_input (BitInputStream): Data to compress.
        bit_output (BitOutputStream): Receives tag, header, codes.
        """
        counts = read_for_counts(bit_input)
        root = make_tree_from_counts(
            counts, on_leaf=lambda symbol, weight: self._trace(DEBUG_HIGH, "count %d %d", symbol, weight)
        )
        codings = make_codings_from_tree(root)
        self._trace(DEBUG_LOW, "tree built with %d leaves", leaf_count(root))
        for symbol, code in sorted(codings.items()):
            self._trace(DEBUG_HIGH, "encoding for %d is %s", symbol, code)

        bit_output.write_bits(BITS_PER_INT, HUFF_TREE)
        write_header(root, bit_output)

        bit_input.reset()
        self._write_compressed_bits(codings, bit_input, bit_output)
        bit_output.close()
        self._trace(DEBUG_LOW, "compress: %d bits read, %d bits written",
                    bit_input.bits_read, bit_output.bits_written)

    def _write_compressed_bits(self, codings, bit_input, bit_output):
        while True:
            word = bit_input.read_bits(BITS_PER_WORD)
            if word == -1:
                break
            code = codings[word]
            bit_output.write_bits(code.length, code.bits)
        eof = codings[PSEUDO_EOF]
        bit_output.write_bits(eof.length, eof.bits)

    def decompress(self, bit_input, bit_output) -> None:
        """
        Decompresses bit_input into bit_output and closes bit_output.

        Raises:
        FormatError: The stream does not start with HUFF_TREE.
        TruncatedStreamError: Input ends before the end-of-stream code.
        CorruptHeaderError: The header describes an unusable tree.
        """
        tag = bit_input.read_bits(BITS_PER_INT)
        if tag != HUFF_TREE:
            if tag == -1:
                raise FormatError("input too short for a huff header")
            raise FormatError(f"illegal header starts with {tag:#010x}")

        root = read_tree_header(bit_input)
        self._trace(DEBUG_LOW, "header read with %d leaves", leaf_count(root))
        self._read_compressed_bits(root, bit_input, bit_output)

        # pass through whatever follows the end-of-stream code
        while True:
            word = bit_input.read_bits(BITS_PER_WORD)
            if word == -1:
                break
            bit_output.write_bits(BITS_PER_WORD, word)
        bit_output.close()
        self._trace(DEBUG_LOW, "decompress: %d bits read, %d bits written",
                    bit_input.bits_read, bit_output.bits_written)

    def _read_compressed_bits(self, root, bit_input, bit_output):
        if root.is_leaf:
            # only an empty input produces a one-leaf tree
            if root.symbol != PSEUDO_EOF:
                raise CorruptHeaderError(f"single-leaf tree holds {root.symbol}, not end-of-stream")
            return

        current = root
        while True:
            bit = bit_input.read_bits(1)
            if bit == -1:
                raise TruncatedStreamError("bad input, no PSEUDO_EOF")
            current = current.right if bit else current.left
            if current.is_leaf:
                if current.symbol == PSEUDO_EOF:
                    break
                bit_output.write_bits(BITS_PER_WORD, current.symbol)
                current = root # start back at the root after a leaf
