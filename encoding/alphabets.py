"""Named alphabets for positional encoding of push IDs.

Digit value is the character's position in the alphabet. Order matters:
it defines both the encoding and the lexicographic sort order of IDs.
"""

from core.errors import InvalidEncodingError

DEFAULT_ENCODING = "base64url"

_ALPHABETS = {
    "base64url": "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz",
    "base62": "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "base58": "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz",
    "base36": "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
}


class Alphabet:
    """Ordered character set with its inverse char -> digit lookup."""

    __slots__ = ("name", "chars", "radix", "last_digit", "_lookup")

    def __init__(self, name, chars):
        lookup = {char: index for index, char in enumerate(chars)}
        if len(lookup) != len(chars):
            raise ValueError(f"alphabet {name} has duplicate characters")
        self.name = name
        self.chars = chars
        self.radix = len(chars)
        self.last_digit = self.radix - 1
        self._lookup = lookup

    def index(self, char):
        """Digit value of char, or None when it is not in the alphabet."""
        return self._lookup.get(char)

    def __contains__(self, char):
        return char in self._lookup

    def __getitem__(self, digit):
        return self.chars[digit]

    def __len__(self):
        return self.radix

    def __repr__(self):
        return f"Alphabet({self.name!r}, radix={self.radix})"


_REGISTRY = {name: Alphabet(name, chars) for name, chars in _ALPHABETS.items()}


def get_encodings():
    """Supported encoding names, widest alphabet first."""
    return list(_REGISTRY)


def is_encoding(value):
    return isinstance(value, str) and value in _REGISTRY


def resolve(name=None):
    """Return the Alphabet for name; None selects the default encoding."""
    if name is None:
        return _REGISTRY[DEFAULT_ENCODING]
    if not isinstance(name, str):
        raise InvalidEncodingError("The encoding must be a string", encoding=name)
    alphabet = _REGISTRY.get(name)
    if alphabet is None:
        choices = ", ".join(f'"{encoding}"' for encoding in _REGISTRY)
        raise InvalidEncodingError(f"The encoding must be one of {choices}", encoding=name)
    return alphabet
