import io
import logging
import random

import pytest

from treehuff.bitstream import BitInputStream, BitOutputStream
from treehuff.codes import make_codings_from_tree
from treehuff.errors import CorruptHeaderError, FormatError, TruncatedStreamError
from treehuff.frequency import read_for_counts
from treehuff.header import write_header
from treehuff.huffman import BITS_PER_INT, DEBUG_HIGH, DEBUG_LOW, HUFF_TREE, HuffProcessor
from treehuff.tree import PSEUDO_EOF, make_tree_from_counts

MAGIC = bytes.fromhex("face8201")


def compress(data, **kwargs):
	sink = io.BytesIO()
	HuffProcessor(**kwargs).compress(BitInputStream(data), BitOutputStream(sink))
	return sink.getvalue()


def decompress(blob, **kwargs):
	sink = io.BytesIO()
	HuffProcessor(**kwargs).decompress(BitInputStream(blob), BitOutputStream(sink))
	return sink.getvalue()


def test_magic_value():
	assert HUFF_TREE == 0xface8201


def test_aab_exact_output():
	blob = compress(b"AAB")
	# tag, 32-bit header, then codes 0 0 10 11 padded with two zero bits
	assert blob == MAGIC + bytes.fromhex("4829 0b00 2c")
	assert decompress(blob) == b"AAB"


def test_empty_input():
	blob = compress(b"")
	assert blob == MAGIC + b"\xc0\x00"
	assert decompress(blob) == b""


@pytest.mark.parametrize("data", [
	b"A",
	b"AB",
	b"\x00",
	b"\xff" * 1000,
	bytes(range(256)),
	b"This is a test" * 100,
])
def test_round_trip(data):
	assert decompress(compress(data)) == data


def test_round_trip_random():
	rng = random.Random(2024)
	for n in (1, 2, 3, 17, 4096):
		data = bytes(rng.getrandbits(8) for _ in range(n))
		assert decompress(compress(data)) == data


def test_round_trip_skewed():
	rng = random.Random(5)
	data = bytes(min(int(rng.expovariate(0.3)), 255) for _ in range(20000))
	blob = compress(data)
	assert len(blob) < len(data)
	assert decompress(blob) == data


def test_compress_closes_output():
	out = BitOutputStream(io.BytesIO())
	HuffProcessor().compress(BitInputStream(b"abc"), out)
	assert out.closed


def test_bad_magic_writes_nothing():
	blob = bytearray(compress(b"Hello World" * 50))
	blob[0] ^= 0xFF
	sink = io.BytesIO()
	out = BitOutputStream(sink)
	with pytest.raises(FormatError):
		HuffProcessor().decompress(BitInputStream(bytes(blob)), out)
	assert out.bits_written == 0
	assert sink.getvalue() == b""


def test_input_shorter_than_magic():
	with pytest.raises(FormatError):
		decompress(MAGIC[:3])
	with pytest.raises(FormatError):
		decompress(b"")


def test_truncated_payload():
	blob = compress(b"This is a test" * 100)
	with pytest.raises(TruncatedStreamError):
		decompress(blob[:len(blob) // 2])


def test_truncated_header():
	blob = compress(bytes(range(256)))
	with pytest.raises(TruncatedStreamError):
		decompress(blob[:10])


def test_single_leaf_must_be_eof():
	# leaf root holding 'A' instead of end-of-stream
	with pytest.raises(CorruptHeaderError):
		decompress(MAGIC + b"\x90\x40")


def test_tail_passes_through():
	data = b"AAB"
	counts = read_for_counts(BitInputStream(data))
	root = make_tree_from_counts(counts)
	codes = make_codings_from_tree(root)
	sink = io.BytesIO()
	out = BitOutputStream(sink)
	out.write_bits(BITS_PER_INT, HUFF_TREE)
	write_header(root, out)
	for b in data:
		out.write_bits(codes[b].length, codes[b].bits)
	eof = codes[PSEUDO_EOF]
	out.write_bits(eof.length, eof.bits)
	for b in b"tail":
		out.write_bits(8, b)
	out.close()
	assert decompress(sink.getvalue()) == b"AABtail"


def test_debug_trace_goes_to_injected_logger(caplog):
	log = logging.getLogger("treehuff.test")
	with caplog.at_level(logging.DEBUG, logger="treehuff.test"):
		decompress(compress(b"AAB", debug=DEBUG_HIGH, logger=log), debug=DEBUG_LOW, logger=log)
	messages = [r.getMessage() for r in caplog.records if r.name == "treehuff.test"]
	assert "count 65 2" in messages
	assert "encoding for 66 is 10" in messages
	assert "encoding for 256 is 11" in messages
	assert "tree built with 3 leaves" in messages
	assert "header read with 3 leaves" in messages
	assert any(m.startswith("decompress:") for m in messages)


def test_no_trace_at_debug_zero(caplog):
	with caplog.at_level(logging.DEBUG):
		compress(b"quiet")
	assert not [r for r in caplog.records if r.name.startswith("treehuff")]
