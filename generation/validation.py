"""Push ID validation."""

from encoding.alphabets import resolve
from generation.push_id import UID_LENGTH


def is_uid(value, encoding=None):
    """
    True when value is a 20-character string over the encoding's alphabet.

    Never raises for a malformed value; raises InvalidEncodingError only for
    an unknown encoding.
    """
    alphabet = resolve(encoding)
    if not isinstance(value, str) or len(value) != UID_LENGTH:
        return False
    return all(char in alphabet for char in value)
