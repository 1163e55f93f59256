"""Monotonic randomized suffix for push IDs."""

import secrets

from internal.logging import get_logger

SUFFIX_LENGTH = 12


class MonotonicSuffix:
    """
    Fixed-width big-endian base-R counter.

    Reseeded with secure random digits when the millisecond changes,
    incremented by one otherwise, so suffixes issued within the same
    millisecond sort strictly after each other.

    When every digit already holds the last digit the carry falls off the
    top: the counter wraps to 0...01 without signalling. Reaching that needs
    R**12 IDs in one millisecond.
    """

    __slots__ = ("alphabet", "_digits")

    def __init__(self, alphabet):
        self.alphabet = alphabet
        self._digits = [0] * SUFFIX_LENGTH

    @property
    def digits(self):
        return tuple(self._digits)

    @property
    def value(self):
        """Suffix read as a big-endian base-R integer."""
        result = 0
        for digit in self._digits:
            result = result * self.alphabet.radix + digit
        return result

    def reseed(self):
        radix = self.alphabet.radix
        digits = self._digits
        for i in range(SUFFIX_LENGTH):
            digits[i] = secrets.randbelow(radix)
        get_logger().debug("suffix reseeded", encoding=self.alphabet.name)

    def increment(self):
        digits = self._digits
        last_digit = self.alphabet.last_digit
        index = SUFFIX_LENGTH - 1
        while index >= 0 and digits[index] == last_digit:
            digits[index] = 0
            index -= 1
        if index < 0:
            get_logger().warn("suffix space exhausted, wrapping", encoding=self.alphabet.name)
            index = SUFFIX_LENGTH - 1
        digits[index] += 1

    def render(self):
        chars = self.alphabet.chars
        return "".join(chars[digit] for digit in self._digits)

    def __repr__(self):
        return f"MonotonicSuffix({self.render()!r})"
