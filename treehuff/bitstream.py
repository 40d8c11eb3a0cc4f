"""
Bit-level reader and writer used by the Huffman codec.

Both sides keep their pending bits in a big-endian bitarray, so every field
is packed most-significant-bit first. The reader pulls bytes from the file
object lazily and reports end of input as -1, never as an exception.
"""

import io

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from .errors import BitStreamError

CHUNK_SIZE = 8192


class BitInputStream:
    def __init__(self, source):
        """
        Wraps a readable binary file object (bytes are wrapped in a BytesIO).

        Parameters:
        source: Binary file object or bytes-like value to read from.
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self.input = source
        self.bits = bitarray(endian="big")
        self.pos = 0
        self.bits_read = 0
        self._origin = source.tell() if source.seekable() else None

    def _fill(self, width: int) -> bool:
        while len(self.bits) - self.pos < width:
            chunk = self.input.read(CHUNK_SIZE)
            if not chunk:
                return False
            if self.pos:
                del self.bits[:self.pos]
                self.pos = 0
            self.bits.frombytes(chunk)
        return True

    def read_bits(self, width: int) -> int:
        """
        Reads the next width bits as an unsigned integer.

        Parameters:
        width (int): Number of bits to read, at least 1.

        Returns:
        int: The value read, or -1 if fewer than width bits are left.
        """
        if width < 1:
            raise ValueError(f"Cannot read {width} bits")
        if not self._fill(width):
            return -1
        if width == 1:
            value = self.bits[self.pos]
        else:
            value = ba2int(self.bits[self.pos:self.pos + width])
        self.pos += width
        self.bits_read += width
        return value

    def reset(self) -> None:
        """Rewinds to the position the stream was opened at."""
        if self._origin is None:
            raise BitStreamError("reset not supported: input is not seekable")
        self.input.seek(self._origin)
        self.bits = bitarray(endian="big")
        self.pos = 0


class BitOutputStream:
    def __init__(self, sink):
        # sink is owned by the caller, close() only flushes into it
        self.output = sink
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.closed = False

    def write_bits(self, width: int, value: int) -> None:
        """
        Appends the low width bits of value, most significant first.

        Parameters:
        width (int): Number of bits to write. Zero writes nothing.
        value (int): Value whose low width bits are written.
        """
        if self.closed:
            raise BitStreamError("write on closed bit stream")
        if width == 0:
            return
        self.bits.extend(int2ba(value & ((1 << width) - 1), length=width, endian="big"))
        self.bits_written += width
        if len(self.bits) >= 8 * CHUNK_SIZE:
            self._drain()

    def _drain(self) -> None:
        whole = len(self.bits) - len(self.bits) % 8
        if whole:
            self.output.write(self.bits[:whole].tobytes())
            del self.bits[:whole]

    def flush(self) -> None:
        # Only whole bytes leave the buffer; a partial byte waits for close()
        self._drain()
        self.output.flush()

    def close(self) -> None:
        """Zero-pads the last partial byte and writes everything out."""
        if self.closed:
            return
        self.bits.fill()
        self._drain()
        self.output.flush()
        self.closed = True
