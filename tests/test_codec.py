"""Unit tests for the alphabet, base codec and timestamp codec."""

import random
from datetime import datetime, timezone

import pytest

from core.errors import InvalidAlphabetError, InvalidLengthError, InvalidSymbolError, TimestampRangeError
from uid.alphabet import Alphabet, DEFAULT_ALPHABET, DEFAULT_SYMBOLS
from uid.codec import decode, encode
from uid.timecodec import (
    MAX_TIME,
    TIME_LENGTH,
    decode_time,
    decode_timestamp,
    encode_timestamp,
    is_valid,
    parse,
)


class TestAlphabet:
    """Tests for Alphabet."""

    def test_default_alphabet(self):
        """Default alphabet is digits, underscore, lowercase."""
        assert DEFAULT_ALPHABET.symbols == "0123456789_abcdefghijklmnopqrstuvwxyz"
        assert DEFAULT_ALPHABET.base == len(DEFAULT_SYMBOLS)
        assert DEFAULT_ALPHABET.zero == "0"
        assert DEFAULT_ALPHABET.max_symbol == "z"

    def test_default_alphabet_sorts_like_strings(self):
        """Symbol order matches code point order."""
        assert "".join(sorted(DEFAULT_SYMBOLS)) == DEFAULT_SYMBOLS

    def test_index_of(self):
        """Symbol position is its digit value."""
        assert DEFAULT_ALPHABET.index_of("0") == 0
        assert DEFAULT_ALPHABET.index_of("_") == 10
        assert DEFAULT_ALPHABET.index_of("a") == 11
        assert DEFAULT_ALPHABET.index_of("z") == 36

    def test_index_of_unknown_symbol(self):
        """Unknown symbol raises InvalidSymbolError."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            DEFAULT_ALPHABET.index_of("A", position=3)
        assert exc_info.value.context["symbol"] == "A"
        assert exc_info.value.context["position"] == 3

    def test_duplicate_symbols_rejected(self):
        """Repeated symbols are rejected."""
        with pytest.raises(InvalidAlphabetError):
            Alphabet("0120")

    def test_too_short_rejected(self):
        """An alphabet needs at least two symbols."""
        with pytest.raises(ValueError):
            Alphabet("0")

    def test_equality(self):
        """Alphabets compare by symbols."""
        assert Alphabet() == DEFAULT_ALPHABET
        assert Alphabet("01") != DEFAULT_ALPHABET


class TestBaseCodec:
    """Tests for encode/decode."""

    def test_encode_zero(self):
        """Zero encodes to the zero symbol."""
        assert encode(0) == "0"

    @pytest.mark.parametrize("n, expected", [(10, "_"), (11, "a"), (36, "z"), (37, "10"), (37 * 37 - 1, "zz")])
    def test_encode_values(self, n, expected):
        """Known values encode most significant first."""
        assert encode(n) == expected

    def test_encode_negative(self):
        """Negative numbers are rejected."""
        with pytest.raises(ValueError):
            encode(-1)

    def test_decode_values(self):
        """Decode is positional."""
        assert decode("10") == 37
        assert decode("zz") == 1368
        assert decode("000z") == 36

    def test_round_trip(self):
        """decode(encode(n)) == n across magnitudes."""
        rng = random.Random(7)
        values = [0, 1, 36, 37, MAX_TIME, 37**17 - 1] + [rng.randrange(37**12) for _ in range(200)]
        for n in values:
            assert decode(encode(n)) == n

    def test_round_trip_custom_alphabet(self):
        """Codec works with any alphabet."""
        hex_alphabet = Alphabet("0123456789abcdef")
        assert encode(255, hex_alphabet) == "ff"
        assert decode("ff", hex_alphabet) == 255

    def test_decode_invalid_symbol(self):
        """Characters outside the alphabet fail."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            decode("0gzf!0000")
        assert exc_info.value.context["symbol"] == "!"
        assert exc_info.value.context["position"] == 4


class TestTimestampCodec:
    """Tests for the fixed-width timestamp prefix."""

    def test_zero_is_padded(self):
        """Zero pads to the full prefix."""
        assert encode_timestamp(0) == "000000000"

    def test_left_padding(self):
        """Short encodings are left-padded with the zero symbol."""
        assert encode_timestamp(37) == "000000010"

    def test_fixed_length(self):
        """Every valid timestamp encodes to TIME_LENGTH symbols."""
        rng = random.Random(3)
        for t in [0, 1, 1_700_000_000_000, MAX_TIME] + [rng.randrange(MAX_TIME) for _ in range(100)]:
            prefix = encode_timestamp(t)
            assert len(prefix) == TIME_LENGTH
            assert decode_timestamp(prefix) == t

    def test_prefix_order_follows_time(self):
        """Later timestamps sort after earlier ones."""
        assert encode_timestamp(1_700_000_000_001) > encode_timestamp(1_700_000_000_000)
        assert encode_timestamp(MAX_TIME) > encode_timestamp(37**8)

    def test_out_of_range(self):
        """Timestamps past MAX_TIME or negative are rejected."""
        with pytest.raises(TimestampRangeError):
            encode_timestamp(MAX_TIME + 1)
        with pytest.raises(TimestampRangeError):
            encode_timestamp(-1)

    def test_prefix_too_narrow(self):
        """Encodings longer than the prefix are rejected."""
        with pytest.raises(TimestampRangeError):
            encode_timestamp(37**3, time_length=3)


class TestParse:
    """Tests for parse/is_valid/decode_time."""

    def test_parse(self):
        """Identifier splits into timestamp and suffix."""
        identifier = encode_timestamp(1_700_000_000_000) + "abcdefgh"
        parsed = parse(identifier)
        assert parsed.timestamp == 1_700_000_000_000
        assert parsed.suffix == "abcdefgh"
        assert parsed.datetime.year == 2023
        assert parsed.to_dict()["time"] == "2023-11-14T22:13:20.000Z"

    def test_parse_max_time(self):
        """Largest timestamp renders in year 4199."""
        parsed = parse(encode_timestamp(MAX_TIME) + "00000000")
        assert parsed.to_dict()["time"] == "4199-11-24T01:22:57.663Z"

    def test_parse_wrong_length(self):
        """Length mismatch raises InvalidLengthError."""
        with pytest.raises(InvalidLengthError) as exc_info:
            parse("0gzfy0hpv")
        assert exc_info.value.context == {"expected": 17, "actual": 9}

    def test_parse_invalid_suffix_symbol(self):
        """Suffix symbols are validated too."""
        with pytest.raises(InvalidSymbolError):
            parse("0gzfy0hpvbcoj-f7h")

    def test_is_valid(self):
        """is_valid checks length and symbols."""
        assert is_valid("0gzfy0hpvbcojf7hx")
        assert not is_valid("0gzfy0hpvbcojf7h")
        assert not is_valid("0GZFY0HPVBCOJF7HX")

    def test_decode_time(self):
        """decode_time returns an aware UTC datetime."""
        identifier = encode_timestamp(1_700_000_000_123) + "00000000"
        assert decode_time(identifier) == datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=timezone.utc)

    def test_parse_prefix_past_max_time(self):
        """A prefix decoding past MAX_TIME is rejected."""
        with pytest.raises(TimestampRangeError) as exc_info:
            parse("z" * 17)
        assert exc_info.value.context["max_time"] == MAX_TIME
        assert exc_info.value.context["timestamp"] > MAX_TIME
        assert not is_valid("z" * 17)

    def test_parse_wide_prefix_past_max_time(self):
        """Wider prefixes are still bounded by max_time."""
        with pytest.raises(TimestampRangeError):
            parse("z" * 20, DEFAULT_ALPHABET, time_length=12, random_length=8)
        assert not is_valid("z" * 20, DEFAULT_ALPHABET, time_length=12, random_length=8)

    def test_parse_custom_max_time(self):
        """max_time is configurable."""
        identifier = encode_timestamp(1000) + "00000000"
        assert parse(identifier, max_time=1000).timestamp == 1000
        with pytest.raises(TimestampRangeError):
            parse(identifier, max_time=999)
        assert not is_valid(identifier, max_time=999)

    def test_decode_time_checks_length(self):
        """decode_time rejects identifiers of the wrong length."""
        with pytest.raises(InvalidLengthError):
            decode_time("0")
