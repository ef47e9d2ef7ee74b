"""Implementation of the RFC 4648 Base64 codec.

Encoding packs each group of up to three bytes into a 24-bit buffer and emits
four symbols from the standard alphabet, padding short final groups with
``=``. Decoding runs the same packing in reverse, one symbol at a time, then
validates the assembled bytes as text.

Truncated input:
    By default a trailing group that never reaches four symbols is dropped
    without complaint, so ``decode("Zm9vYg")`` returns ``"foo"``. This is the
    expected permissive behavior, not a bug. Pass ``strict=True`` to raise
    ``IncompleteGroup`` instead.
"""

import codecs
from typing import Union

from .alphabet import PADDING, index_of, symbol_for
from .codec import BytesLike, Codec
from .errors import IncompleteGroup, InvalidCharacter, TextDecodingError

GROUP_BYTES = 3
GROUP_SYMBOLS = 4
_SIX_BITS = 0x3F


class Base64Codec(Codec):
    """Standard-alphabet Base64 codec with ``=`` padding.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, strict: bool = False, encoding: str = "utf-8") -> None:
        """Initialize the codec.

        Args:
            strict: If True, decoding raises IncompleteGroup when the input
                   ends partway through a group instead of dropping the
                   trailing symbols.
            encoding: Text encoding used to turn str input into bytes when
                     encoding, and to validate decoded bytes as text.

        Raises:
            LookupError: If encoding is not a known codec name.
        """
        codecs.lookup(encoding)
        self._strict = strict
        self._encoding = encoding

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def encoding(self) -> str:
        return self._encoding

    def encode(self, data: Union[BytesLike, str]) -> str:
        """Encode bytes as Base64 text.

        Args:
            data: Bytes to encode. A str is first encoded with the codec's
                 text encoding.

        Returns:
            Base64 text whose length is a multiple of four

        Raises:
            TypeError: If data is neither bytes-like nor str.
        """
        if isinstance(data, str):
            raw = data.encode(self._encoding)
        elif isinstance(data, (bytes, bytearray, memoryview)):
            raw = bytes(data)
        else:
            raise TypeError(f"expected bytes-like object or str, got {type(data).__name__}")

        symbols = []
        for start in range(0, len(raw), GROUP_BYTES):
            group = raw[start:start + GROUP_BYTES]

            buffer = 0
            for i, byte in enumerate(group):
                buffer |= byte << (16 - 8 * i)

            # n input bytes carry enough bits for n + 1 symbols
            meaningful = len(group) + 1
            for slot in range(GROUP_SYMBOLS):
                if slot < meaningful:
                    symbols.append(symbol_for((buffer >> (18 - 6 * slot)) & _SIX_BITS))
                else:
                    symbols.append(PADDING)

        return "".join(symbols)

    def decode_bytes(self, text: str) -> bytes:
        """Decode Base64 text into raw bytes.

        Args:
            text: Base64 text

        Returns:
            The decoded bytes, three per complete group minus one per
            padding symbol in that group

        Raises:
            InvalidCharacter: On the first symbol outside the alphabet and
                             padding. Nothing after it is examined.
            IncompleteGroup: In strict mode, if the input ends mid-group.
            TypeError: If text is not a str.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        output = bytearray()
        slot = 0
        buffer = 0
        padding = 0
        group_start = 0

        for position, symbol in enumerate(text):
            if slot == 0:
                group_start = position

            if symbol == PADDING:
                padding += 1
            else:
                index = index_of(symbol)
                if index is None:
                    raise InvalidCharacter(symbol, position)
                buffer |= index << (18 - 6 * slot)

            if slot == GROUP_SYMBOLS - 1:
                output += buffer.to_bytes(GROUP_BYTES, "big")[:max(0, GROUP_BYTES - padding)]
                slot = 0
                buffer = 0
                padding = 0
            else:
                slot += 1

        if slot and self._strict:
            raise IncompleteGroup(group_start, slot)

        return bytes(output)

    def decode(self, text: str) -> str:
        """Decode Base64 text and interpret the result as text.

        Args:
            text: Base64 text

        Returns:
            The decoded text

        Raises:
            InvalidCharacter: If text contains a symbol outside the alphabet.
            IncompleteGroup: In strict mode, if the input ends mid-group.
            TextDecodingError: If the decoded bytes are not valid in the
                              codec's text encoding.
        """
        raw = self.decode_bytes(text)
        try:
            return raw.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise TextDecodingError(self._encoding, e) from e


_default_codec = Base64Codec()


def encode(data: Union[BytesLike, str]) -> str:
    """Encode data with a shared permissive UTF-8 codec."""
    return _default_codec.encode(data)


def decode(text: str) -> str:
    """Decode text with a shared permissive UTF-8 codec."""
    return _default_codec.decode(text)
