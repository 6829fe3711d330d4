"""
Monotonic identifier generator.

A generator remembers the last timestamp and identifier it produced. Calls
within the same millisecond increment the previous identifier, so one
instance yields strictly increasing identifiers; a new millisecond (or a
clock that moved backwards) mints a fresh timestamp prefix and random suffix.

Use the process-wide default generator for most cases, or create scoped
instances (per request, per stream) with create_monotonic_generator().
"""

import threading

from config import UIDConfig
from internal.logging import get_logger
from uid.alphabet import Alphabet
from uid.increment import increment
from uid.random import produce_suffix
from uid.timecodec import encode_timestamp
from utils.timestamp import now_millis

_default = None
_default_lock = threading.Lock()


class MonotonicGenerator:
    def __init__(self, config=None, clock=None, choice=None):
        self.config = config or UIDConfig()
        self.alphabet = Alphabet(self.config.alphabet)
        self._clock = clock or now_millis
        self._choice = choice
        self._lock = threading.Lock()
        self._last_timestamp = None
        self._last_identifier = None
        self._stats = {"minted": 0, "incremented": 0, "prefix_carries": 0, "clock_regressions": 0}

    @property
    def last_timestamp(self):
        return self._last_timestamp

    @property
    def last_identifier(self):
        return self._last_identifier

    def mint(self, timestamp=None, random_length=None):
        """Fresh identifier: encoded timestamp plus random suffix. Leaves state alone."""
        if timestamp is None:
            timestamp = self._clock()
        if random_length is None:
            random_length = self.config.random_length
        prefix = encode_timestamp(timestamp, self.alphabet, self.config.time_length, self.config.max_time)
        return prefix + produce_suffix(random_length, self.alphabet, self._choice)

    def next_after(self, identifier):
        """Identifier sorting right after `identifier`, bounded by strict_prefix."""
        floor = self.config.time_length if self.config.strict_prefix else 0
        return increment(identifier, self.alphabet, floor)

    def generate(self):
        """Next identifier of this generator; strictly greater within a millisecond."""
        # Log records are gathered under the lock and written after it is released
        events = []
        with self._lock:
            now = self._clock()
            last_timestamp, last_identifier = self._last_timestamp, self._last_identifier

            if last_identifier is not None and now == last_timestamp:
                identifier = self.next_after(last_identifier)
                self._stats["incremented"] += 1
                time_length = self.config.time_length
                if identifier[:time_length] != last_identifier[:time_length]:
                    self._stats["prefix_carries"] += 1
                    events.append(("warn", "Increment carried into timestamp prefix",
                                   {"previous": last_identifier, "uid": identifier}))
            else:
                if last_timestamp is not None and now < last_timestamp:
                    self._stats["clock_regressions"] += 1
                    events.append(("warn", "Clock moved backwards", {"last_timestamp": last_timestamp, "now": now}))
                identifier = self.mint(now)
                self._stats["minted"] += 1
                events.append(("debug", "Minted identifier", {"uid": identifier, "timestamp": now}))

            self._last_timestamp = now
            self._last_identifier = identifier

        logger = get_logger()
        for level, message, fields in events:
            getattr(logger, level)(message, **fields)
        return identifier

    def generate_batch(self, count, seed=None):
        """`count` strictly increasing identifiers following `seed` (fresh mint if omitted).

        Ordering is only guaranteed within the returned list.
        """
        if count < 1:
            raise ValueError(f"Batch count must be >= 1, got {count}")
        identifier = seed if seed is not None else self.mint()
        identifiers = []
        for _ in range(count):
            identifier = self.next_after(identifier)
            identifiers.append(identifier)
        return identifiers

    def get_stats(self):
        with self._lock:
            return {
                **self._stats,
                "last_timestamp": self._last_timestamp,
                "last_identifier": self._last_identifier,
            }


def create_monotonic_generator(config=None, clock=None, choice=None):
    """Independent generator with its own state."""
    return MonotonicGenerator(config=config, clock=clock, choice=choice)


def get_default_generator():
    """Process-wide generator with default settings, created on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = MonotonicGenerator()
    return _default


def generate():
    return get_default_generator().generate()


def generate_one(random_length=None):
    """Single fresh identifier; no ordering across calls within a millisecond."""
    return get_default_generator().mint(random_length=random_length)


def generate_batch(count=1):
    return get_default_generator().generate_batch(count)
