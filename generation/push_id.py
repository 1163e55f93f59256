"""
Push ID generation.

ID format: 8 chars encoded millisecond timestamp + 12 chars monotonic
suffix = 20 chars over one alphabet. IDs sort lexicographically in
generation order within one process.

Instances are not thread-safe: confine a PushID or a sequence to one
thread or guard calls with a lock.
"""

import threading

from encoding.alphabets import resolve
from encoding.timestamp import TIMESTAMP_LENGTH, encode_timestamp
from generation.suffix import SUFFIX_LENGTH, MonotonicSuffix
from internal.logging import get_logger
from utils.timestamp import now_millis

UID_LENGTH = TIMESTAMP_LENGTH + SUFFIX_LENGTH


class GeneratorState:
    """Per-generator state plus the step function shared by every generator shape."""

    __slots__ = ("alphabet", "timestamp", "encoded_timestamp", "suffix")

    def __init__(self, alphabet):
        self.alphabet = alphabet
        self.timestamp = None
        self.encoded_timestamp = None
        self.suffix = MonotonicSuffix(alphabet)

    def step(self):
        now = now_millis()
        if now != self.timestamp:
            self.timestamp = now
            self.encoded_timestamp = encode_timestamp(now, self.alphabet.name)
            self.suffix.reseed()
        else:
            self.suffix.increment()
        return self.encoded_timestamp + self.suffix.render()


class PushID:
    """Reusable push ID generator bound to one encoding."""

    __slots__ = ("_state",)

    def __init__(self, encoding=None):
        self._state = GeneratorState(resolve(encoding))
        get_logger().debug("push id generator created", encoding=self.encoding)

    @property
    def encoding(self):
        return self._state.alphabet.name

    @property
    def timestamp(self):
        """Millisecond timestamp of the last generated ID, None before the first."""
        return self._state.timestamp

    def generate(self):
        return self._state.step()

    def __iter__(self):
        step = self._state.step
        while True:
            yield step()

    def __repr__(self):
        return f"PushID(encoding={self.encoding!r}, timestamp={self.timestamp!r})"


def is_push_id(value):
    return isinstance(value, PushID)


def _sequence(state):
    while True:
        yield state.step()


def generator(encoding=None):
    """Unbounded iterator of push IDs. The encoding is checked immediately."""
    return _sequence(GeneratorState(resolve(encoding)))


class SafeIterator:
    """Iterator wrapper exposing only the iteration protocol of a sequence."""

    __slots__ = ("_next",)

    def __init__(self, iterator):
        step = iterator.__next__

        def _next():
            return step()

        self._next = _next

    def __iter__(self):
        return self

    def __next__(self):
        return self._next()

    def __repr__(self):
        return "SafeIterator()"


def safe_generator(encoding=None):
    return SafeIterator(generator(encoding))


_default = None
_default_lock = threading.Lock()


def next_id():
    """Next ID from the process-wide default generator. Thread-safe."""
    global _default
    with _default_lock:
        if _default is None:
            _default = PushID()
        return _default.generate()
