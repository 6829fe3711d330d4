"""Add-one-with-carry over alphabet numerals."""

from core.errors import IdentifierOverflowError, PrefixCarryError
from uid.alphabet import DEFAULT_ALPHABET


def increment(identifier, alphabet=DEFAULT_ALPHABET, floor=0):
    """Return the identifier that sorts immediately after `identifier`.

    The whole string is one numeral: a carry out of the random suffix moves
    into the timestamp prefix unless `floor` forbids it. Positions left of
    `floor` are never changed; a carry that would reach them raises
    PrefixCarryError. Only scanned symbols are validated.
    """
    chars = list(identifier)
    max_position = alphabet.base - 1

    for position in range(len(chars) - 1, -1, -1):
        if position < floor:
            raise PrefixCarryError(
                f"Increment of {identifier!r} would carry into position {position}",
                value=identifier,
                context={"floor": floor},
            )
        digit = alphabet.index_of(chars[position], position=position, value=identifier)
        if digit == max_position:
            chars[position] = alphabet.zero
            continue
        chars[position] = alphabet[digit + 1]
        return "".join(chars)

    raise IdentifierOverflowError(f"Cannot increment {identifier!r}: every symbol is at maximum", value=identifier)
