"""ISBN-10 / ISBN-13 checksum validation."""
from __future__ import annotations

import re

ISBN10_PATTERN = re.compile(r"[0-9]{9}[0-9X]")
ISBN13_PATTERN = re.compile(r"[0-9]{13}")
_SEPARATORS = re.compile(r"[\s-]+")


def compact_isbn(value: str | None) -> str:
    """Drop spaces and hyphens: ``978-0441172719`` -> ``9780441172719``."""
    return _SEPARATORS.sub("", value or "")


def is_valid_isbn10(value: str) -> bool:
    if not ISBN10_PATTERN.fullmatch(value):
        return False
    total = 0
    for position, ch in enumerate(value, start=1):
        digit = 10 if ch == "X" else int(ch)
        total += position * digit
    return total % 11 == 0


def is_valid_isbn13(value: str) -> bool:
    if not ISBN13_PATTERN.fullmatch(value):
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(value[:12]))
    return (10 - total % 10) % 10 == int(value[12])


def is_valid_isbn(value: str | None) -> bool:
    """Return True for a well-formed ISBN-10 or ISBN-13 with a correct check digit."""
    candidate = compact_isbn(value)
    if len(candidate) == 10:
        return is_valid_isbn10(candidate)
    if len(candidate) == 13:
        return is_valid_isbn13(candidate)
    return False
