from .compression import Compressor
from .errors import BitStreamError, CorruptHeaderError, FormatError, HuffError, TruncatedStreamError
from .huffman import HuffProcessor

__version__ = "0.1.0"
