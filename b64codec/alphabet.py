"""The RFC 4648 standard Base64 alphabet.

Index 0-25 are ``A``-``Z``, 26-51 are ``a``-``z``, 52-61 are ``0``-``9``,
then ``+`` (62) and ``/`` (63). The padding symbol ``=`` is not part of the
alphabet.
"""

import string
from types import MappingProxyType
from typing import Mapping, Optional

ALPHABET: str = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
PADDING: str = "="

REVERSE_ALPHABET: Mapping[str, int] = MappingProxyType(
    {symbol: index for index, symbol in enumerate(ALPHABET)}
)

assert len(ALPHABET) == 64, f"Alphabet size mismatch: {len(ALPHABET)}"


def symbol_for(index: int) -> str:
    """Return the alphabet symbol for a 6-bit index.

    Raises:
        ValueError: If index is outside 0-63.
    """
    if not 0 <= index < 64:
        raise ValueError(f"index must be in range 0-63, got {index}")
    return ALPHABET[index]


def index_of(symbol: str) -> Optional[int]:
    """Return the 6-bit index of symbol, or None if it is not in the alphabet."""
    return REVERSE_ALPHABET.get(symbol)
