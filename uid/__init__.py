from uid.alphabet import Alphabet, DEFAULT_ALPHABET
from uid.codec import encode, decode
from uid.timecodec import (
    MAX_TIME,
    RANDOM_LENGTH,
    TIME_LENGTH,
    ParsedUID,
    decode_time,
    decode_timestamp,
    encode_timestamp,
    is_valid,
    parse,
)
from uid.random import produce_suffix
from uid.increment import increment
from uid.generator import (
    MonotonicGenerator,
    create_monotonic_generator,
    generate,
    generate_batch,
    generate_one,
    get_default_generator,
)

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "encode",
    "decode",
    "MAX_TIME",
    "RANDOM_LENGTH",
    "TIME_LENGTH",
    "ParsedUID",
    "decode_time",
    "decode_timestamp",
    "encode_timestamp",
    "is_valid",
    "parse",
    "produce_suffix",
    "increment",
    "MonotonicGenerator",
    "create_monotonic_generator",
    "generate",
    "generate_batch",
    "generate_one",
    "get_default_generator",
]
