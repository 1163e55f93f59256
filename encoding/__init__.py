from encoding.alphabets import DEFAULT_ENCODING, Alphabet, get_encodings, is_encoding, resolve
from encoding.timestamp import TIMESTAMP_LENGTH, MAX_SAFE_INTEGER, encode_timestamp, decode_timestamp

__all__ = [
    "DEFAULT_ENCODING",
    "Alphabet",
    "get_encodings",
    "is_encoding",
    "resolve",
    "TIMESTAMP_LENGTH",
    "MAX_SAFE_INTEGER",
    "encode_timestamp",
    "decode_timestamp",
]
