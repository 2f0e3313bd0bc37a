import re
from collections.abc import Iterable

from vectra_e2e.mappers.price_aggregator import normalize_spaces

_PHONE_RE = re.compile(r"\+?(?:48)?[\s-]?(\d{3}[\s-]?\d{3}[\s-]?\d{3})", re.ASCII)
_SEPARATORS_RE = re.compile(r"[\s-]")
_COUNTRY_CODE = "48"
_ASCII_DIGITS = frozenset("0123456789")


def _digits_only(phone: str) -> str:
    return "".join(c for c in phone if c in _ASCII_DIGITS)


def normalize_phone(raw: str) -> str:
    """Reduce a phone to its 9 national digits (drops a leading +48)."""
    digits = _digits_only(raw)
    if len(digits) == 11 and digits.startswith(_COUNTRY_CODE):
        return digits[len(_COUNTRY_CODE):]
    return digits


def format_phone(number: str) -> str:
    """Render ``123456789`` the way the site prints it: ``123 456 789``."""
    digits = normalize_phone(number)
    return f"{digits[:3]} {digits[3:6]} {digits[6:]}"


def extract(text: str | None) -> frozenset[str]:
    if not text:
        return frozenset()

    found: set[str] = set()
    for match in _PHONE_RE.finditer(normalize_spaces(text)):
        cleaned = _SEPARATORS_RE.sub("", match.group(1))
        if is_valid_phone(cleaned):
            found.add(cleaned)
    return frozenset(found)


def contains(numbers: Iterable[str], expected: str) -> bool:
    return normalize_phone(expected) in set(numbers)


def is_valid_phone(number: str) -> bool:
    return len(number) == 9 and all(c in _ASCII_DIGITS for c in number)
