"""Text helpers."""

_SPACE_CHARS = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Remove leading and trailing spaces and tabs (other whitespace stays)."""
    return text.strip(" \t")


def is_valid_input_char(char: str) -> bool:
    """Whether a typed character is an ASCII letter, digit or whitespace."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return (char.isascii() and char.isalnum()) or char in _SPACE_CHARS