"""
Checksum oracle - single-byte XOR integrity tag.

The tag for a symbol is its code point XOR 0xFF, rendered as two
uppercase hex digits. It detects corruption only; it is not a security
mechanism.
"""
from dutcheck.exceptions import InvalidChecksumError, InvalidSymbolError

CHECKSUM_MASK = 0xFF
MAX_CODE_POINT = 0xFF


def symbol_code_point(symbol: str) -> int:
    """
    Return the code point of the first character of ``symbol``.

    Raises:
        InvalidSymbolError: symbol is not a non-empty string, or its first
            character lies outside the single-byte range
    """
    if not isinstance(symbol, str):
        raise InvalidSymbolError(f"Symbol must be a string, got {type(symbol).__name__}", symbol)
    if not symbol:
        raise InvalidSymbolError("Symbol must not be empty", symbol)

    code_point = ord(symbol[0])
    if code_point > MAX_CODE_POINT:
        raise InvalidSymbolError(
            f"Symbol {symbol[0]!r} is outside the single-byte range", symbol
        )
    return code_point


def compute(symbol: str) -> str:
    """Two-digit uppercase hex checksum of the first character of ``symbol``"""
    return f"{symbol_code_point(symbol) ^ CHECKSUM_MASK:02X}"


def validate(symbol: str, checksum: str) -> bool:
    """True iff ``checksum`` (case-insensitive) equals ``compute(symbol)``"""
    if not isinstance(checksum, str):
        raise InvalidChecksumError(
            f"Checksum must be a string, got {type(checksum).__name__}",
            {"checksum": repr(checksum)},
        )
    return checksum.upper() == compute(symbol)
