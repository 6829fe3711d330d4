"""
Fixed-width timestamp prefix.

An identifier is TIME_LENGTH prefix symbols (milliseconds since the Unix
epoch, left-padded with the zero symbol) followed by RANDOM_LENGTH suffix
symbols. With the default alphabet, 46 bits of milliseconds fit in nine
symbols and last until 4199-11-24T01:22:57.663Z.
"""

from core.errors import InvalidLengthError, TimestampRangeError
from uid.alphabet import DEFAULT_ALPHABET
from uid.codec import decode, encode
from utils.timestamp import format_millis, millis_to_datetime

# ! Don't change these constants: persisted identifiers depend on them.
MAX_TIME = 2**46 - 1
TIME_LENGTH = 9
RANDOM_LENGTH = 8


def encode_timestamp(timestamp, alphabet=DEFAULT_ALPHABET, time_length=TIME_LENGTH, max_time=MAX_TIME):
    """Encode milliseconds as a `time_length` prefix, zero-padded on the left."""
    if timestamp < 0 or timestamp > max_time:
        raise TimestampRangeError(
            f"Timestamp {timestamp} is outside [0, {max_time}]",
            timestamp=timestamp,
            max_time=max_time,
        )
    encoded = encode(timestamp, alphabet)
    if len(encoded) > time_length:
        raise TimestampRangeError(
            f"Timestamp {timestamp} needs {len(encoded)} symbols, prefix holds {time_length}",
            timestamp=timestamp,
            max_time=max_time,
        )
    return encoded.rjust(time_length, alphabet.zero)


def decode_timestamp(prefix, alphabet=DEFAULT_ALPHABET):
    return decode(prefix, alphabet)


class ParsedUID:
    __slots__ = ("identifier", "timestamp", "suffix")

    def __init__(self, identifier, timestamp, suffix):
        self.identifier = identifier
        self.timestamp = timestamp
        self.suffix = suffix

    @property
    def datetime(self):
        return millis_to_datetime(self.timestamp)

    def to_dict(self):
        return {
            "id": self.identifier,
            "timestamp_ms": self.timestamp,
            "time": format_millis(self.timestamp),
            "suffix": self.suffix,
        }


def parse(
    identifier,
    alphabet=DEFAULT_ALPHABET,
    time_length=TIME_LENGTH,
    random_length=RANDOM_LENGTH,
    max_time=MAX_TIME,
):
    """Split an identifier into its decoded timestamp and suffix.

    Every symbol is validated, suffix included, and the prefix must decode
    to a timestamp encode_timestamp() would accept.
    """
    expected = time_length + random_length
    if len(identifier) != expected:
        raise InvalidLengthError(
            f"Identifier has {len(identifier)} symbols, expected {expected}",
            expected=expected,
            actual=len(identifier),
        )
    prefix, suffix = identifier[:time_length], identifier[time_length:]
    for position, symbol in enumerate(suffix, start=time_length):
        alphabet.index_of(symbol, position=position, value=identifier)
    timestamp = decode_timestamp(prefix, alphabet)
    if timestamp > max_time:
        raise TimestampRangeError(
            f"Prefix {prefix!r} decodes to {timestamp}, past {max_time}",
            timestamp=timestamp,
            max_time=max_time,
        )
    return ParsedUID(identifier, timestamp, suffix)


def is_valid(
    identifier,
    alphabet=DEFAULT_ALPHABET,
    time_length=TIME_LENGTH,
    random_length=RANDOM_LENGTH,
    max_time=MAX_TIME,
):
    """True when parse() would accept `identifier`."""
    if len(identifier) != time_length + random_length:
        return False
    if not all(symbol in alphabet for symbol in identifier):
        return False
    return decode_timestamp(identifier[:time_length], alphabet) <= max_time


def decode_time(
    identifier,
    alphabet=DEFAULT_ALPHABET,
    time_length=TIME_LENGTH,
    random_length=RANDOM_LENGTH,
    max_time=MAX_TIME,
):
    """UTC datetime of the identifier's timestamp prefix."""
    return parse(identifier, alphabet, time_length, random_length, max_time).datetime
