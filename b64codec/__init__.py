"""b64codec - An RFC 4648 Base64 codec written out in plain Python."""

__version__ = "0.1.0"

from .codec import Codec
from .base64_codec import Base64Codec, encode, decode
from .alphabet import ALPHABET, PADDING, REVERSE_ALPHABET
from .errors import DecodeError, InvalidCharacter, TextDecodingError, IncompleteGroup

__all__ = [
    "Codec",
    "Base64Codec",
    "encode",
    "decode",
    "ALPHABET",
    "PADDING",
    "REVERSE_ALPHABET",
    "DecodeError",
    "InvalidCharacter",
    "TextDecodingError",
    "IncompleteGroup",
]
