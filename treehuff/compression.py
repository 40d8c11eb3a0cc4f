import io

from .bitstream import BitInputStream, BitOutputStream
from .huffman import HuffProcessor


class Compressor:
        # Byte-level entry point: wraps bytes or files in bit streams and hands
        # them to the processor for the selected method.
        VALID_METHODS = {'huffman'}

        def __init__(self, method='huffman', debug=0, logger=None):
            """
            Initializes the Compressor with the specified compression method.

            Parameters:
            method (str): The compression method to be used ('huffman').
            debug (int): Trace level handed to the processor.
            logger (logging.Logger, optional): Trace destination.
            """
            self.method = method.lower()
            if self.method not in self.VALID_METHODS:
                raise ValueError(f"Unsupported compression method: {self.method}")
            self.processor = HuffProcessor(debug=debug, logger=logger)

        def compress(self, data: bytes) -> bytes:
            """
            Compresses the given bytes.

            Parameters:
            data (bytes): The data to compress.

            Returns:
            bytes: Tag, tree header and codes, zero-padded to a whole byte.
            """
            if not isinstance(data, (bytes, bytearray)):
                raise TypeError("Input data must be bytes.")
            sink = io.BytesIO()
            self.processor.compress(BitInputStream(data), BitOutputStream(sink))
            return sink.getvalue()

        def decompress(self, compressed: bytes) -> bytes:
            """
            Decompresses bytes produced by compress().

            Parameters:
            compressed (bytes): Compressed data.

            Returns:
            bytes: The original data, followed by any pass-through tail.
            """
            if not isinstance(compressed, (bytes, bytearray)):
                raise TypeError("Input compressed data must be bytes.")
            sink = io.BytesIO()
            self.processor.decompress(BitInputStream(compressed), BitOutputStream(sink))
            return sink.getvalue()

        def compress_file(self, src, dst):
            """
            Compresses the file at src into dst.

            Returns:
            tuple: (bits read, bits written). Bits read counts both passes.
            """
            with open(src, "rb") as fin, open(dst, "wb") as fout:
                bit_input, bit_output = BitInputStream(fin), BitOutputStream(fout)
                self.processor.compress(bit_input, bit_output)
            return bit_input.bits_read, bit_output.bits_written

        def decompress_file(self, src, dst):
            with open(src, "rb") as fin, open(dst, "wb") as fout:
                bit_input, bit_output = BitInputStream(fin), BitOutputStream(fout)
                self.processor.decompress(bit_input, bit_output)
            return bit_input.bits_read, bit_output.bits_written
