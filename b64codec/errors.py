"""Exceptions raised while decoding Base64 text.

Encoding never fails, so every error here is a ``DecodeError``. Callers that
do not care about the failure kind can catch ``DecodeError`` (or
``ValueError``) and be done; the subclasses carry the details.
"""


class DecodeError(ValueError):
    """Base class for all Base64 decoding failures."""


class InvalidCharacter(DecodeError):
    """The input contains a symbol outside the alphabet and padding."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"invalid Base64 character {character!r} at position {position}")


class TextDecodingError(DecodeError):
    """The decoded bytes are not valid text in the requested encoding."""

    def __init__(self, encoding: str, diagnostic: UnicodeDecodeError) -> None:
        self.encoding = encoding
        self.diagnostic = diagnostic
        super().__init__(f"decoded bytes are not valid {encoding}: {diagnostic}")


class IncompleteGroup(DecodeError):
    """Strict mode only: the input ends partway through a 4-symbol group."""

    def __init__(self, position: int, symbols: int) -> None:
        self.position = position
        self.symbols = symbols
        super().__init__(
            f"incomplete Base64 group at position {position}: "
            f"{symbols} of 4 symbols present"
        )
