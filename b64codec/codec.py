"""Abstract base class for codecs."""

from abc import ABC, abstractmethod
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class Codec(ABC):
    """Base codec interface for turning bytes into text and back."""

    @abstractmethod
    def encode(self, data: Union[BytesLike, str]) -> str:
        """Encode a byte sequence.

        Args:
            data: The bytes to encode

        Returns:
            The encoded text
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        """Decode text produced by encode.

        Args:
            text: The encoded text

        Returns:
            The decoded text
        """
        pass
