from .tree import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF


def read_for_counts(bit_input):
    """
    Counts every byte of the input, then rewinds it for the encoding pass.

    Parameters:
    bit_input (BitInputStream): Stream positioned at the start of the data.

    Returns:
    list[int]: ALPH_SIZE + 1 counts, the last one (PSEUDO_EOF) always 1.
    """
    counts = [0] * (ALPH_SIZE + 1)
    while True:
        word = bit_input.read_bits(BITS_PER_WORD)
        if word == -1:
            break
        counts[word] += 1
    bit_input.reset()
    counts[PSEUDO_EOF] = 1 # force a code for end-of-stream, even on empty input
    return counts
