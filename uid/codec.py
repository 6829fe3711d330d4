"""Integer <-> string numerals over an Alphabet."""

from uid.alphabet import DEFAULT_ALPHABET


def encode(n, alphabet=DEFAULT_ALPHABET):
    """Encode a non-negative integer, most significant symbol first.

    Output width is whatever `n` needs; pad it yourself for fixed width.
    """
    if n < 0:
        raise ValueError(f"Cannot encode negative number {n}")
    if n == 0:
        return alphabet.zero

    base = alphabet.base
    chars = []
    while n > 0:
        n, remainder = divmod(n, base)
        chars.append(alphabet[remainder])
    
    return "".join(reversed(chars))


def decode(value, alphabet=DEFAULT_ALPHABET):
    """Decode a numeral produced by encode() with the same alphabet."""
    base = alphabet.base
    n = 0
    for position, symbol in enumerate(value):
        n = n * base + alphabet.index_of(symbol, position=position, value=value)
    return n
