"""
Ordered symbol set for identifier numerals.

The position of a symbol is both its digit value and its sort rank, so
identifiers compare correctly as plain strings only when the alphabet is in
ascending code point order. Never change the alphabet of persisted data:
every stored identifier would silently change meaning.
"""

from core.errors import InvalidAlphabetError, InvalidSymbolError

# Digits, underscore, lowercase: ascending ASCII, URL-safe.
DEFAULT_SYMBOLS = "0123456789_abcdefghijklmnopqrstuvwxyz"


class Alphabet:
    __slots__ = ("symbols", "base", "zero", "max_symbol", "_index")

    def __init__(self, symbols=DEFAULT_SYMBOLS):
        if len(symbols) < 2:
            raise InvalidAlphabetError("Alphabet needs at least two symbols", context={"symbols": symbols})
        index = {}
        for position, symbol in enumerate(symbols):
            if len(symbol) != 1:
                raise InvalidAlphabetError("Alphabet symbols must be single characters", context={"symbol": symbol})
            if symbol in index:
                raise InvalidAlphabetError("Alphabet symbols must be distinct", context={"symbol": symbol})
            index[symbol] = position

        self.symbols = "".join(symbols)
        self.base = len(self.symbols)
        self.zero = self.symbols[0]
        self.max_symbol = self.symbols[-1]
        self._index = index

    def index_of(self, symbol, position=None, value=None):
        """Digit value of `symbol`; raises InvalidSymbolError if it is not in the alphabet."""
        try:
            return self._index[symbol]
        except KeyError:
            raise InvalidSymbolError(
                f"Symbol {symbol!r} is not in the alphabet",
                symbol=symbol,
                position=position,
                value=value,
            ) from None

    def __getitem__(self, position):
        return self.symbols[position]

    def __contains__(self, symbol):
        return symbol in self._index

    def __len__(self):
        return self.base

    def __eq__(self, other):
        return isinstance(other, Alphabet) and other.symbols == self.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __repr__(self):
        return f"Alphabet({self.symbols!r})"


DEFAULT_ALPHABET = Alphabet()
