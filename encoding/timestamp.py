"""
Fixed-width timestamp codec.

A millisecond timestamp is written as exactly TIMESTAMP_LENGTH big-endian
base-R digits. Timestamps needing more digits keep only their low digits,
so decode(encode(t)) == t holds for t in [0, R**8 - 1] only. For base64url
that bound is far beyond any wall-clock value; for base36 it is reached in
the year 2059.
"""

import decimal
import math
import numbers

from core.errors import InvalidTimestampError, OutOfRangeError, TooShortError, InvalidCharacterError
from encoding.alphabets import resolve

TIMESTAMP_LENGTH = 8
MAX_SAFE_INTEGER = 2 ** 53 - 1


def _to_integer(timestamp):
    """Truncate toward zero; NaN becomes 0, infinities pass through for the range check."""
    if isinstance(timestamp, bool) or not isinstance(timestamp, (numbers.Real, decimal.Decimal)):
        raise InvalidTimestampError("The timestamp must be a number", timestamp=timestamp)
    if isinstance(timestamp, numbers.Integral):
        return int(timestamp)
    if isinstance(timestamp, decimal.Decimal):
        if timestamp.is_nan():
            return 0
        if timestamp.is_infinite():
            return float(timestamp)
        return int(timestamp)
    value = float(timestamp)
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return value
    return math.trunc(timestamp)


def _encode(timestamp, alphabet):
    radix = alphabet.radix
    chars = []
    for _ in range(TIMESTAMP_LENGTH):
        timestamp, digit = divmod(timestamp, radix)
        chars.append(alphabet[digit])
    chars.reverse()
    return "".join(chars)


def encode_timestamp(timestamp, encoding=None):
    """Encode a millisecond timestamp as an 8-character string."""
    alphabet = resolve(encoding)
    timestamp = _to_integer(timestamp)
    if timestamp < 0:
        raise OutOfRangeError("The timestamp must be greater than or equal to zero", timestamp=timestamp)
    if timestamp > MAX_SAFE_INTEGER:
        raise OutOfRangeError(
            "The timestamp must be less than or equal to the maximum safe integer", timestamp=timestamp
        )
    return _encode(timestamp, alphabet)


def decode_timestamp(string, encoding=None):
    """Decode the first 8 characters of string back to a millisecond timestamp."""
    alphabet = resolve(encoding)
    string = str(string)
    if len(string) < TIMESTAMP_LENGTH:
        raise TooShortError(
            f"The length of the string must be greater than or equal to {TIMESTAMP_LENGTH}",
            length=len(string),
        )
    result = 0
    for index, char in enumerate(string[:TIMESTAMP_LENGTH]):
        digit = alphabet.index(char)
        if digit is None:
            raise InvalidCharacterError(char, index, alphabet.name)
        result = result * alphabet.radix + digit
    return result
