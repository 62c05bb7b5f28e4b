"""Parsing of decimal command-line numbers and linear range mapping."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


class InvalidNumberError(ValueError):
    """Raised when a text is not a plain decimal number."""


def _validate(text: str) -> str:
    """Return the part of ``text`` after an optional sign, checking its characters."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.count(".") > 1 or any(ch not in _DIGITS and ch != "." for ch in body):
        raise InvalidNumberError(
            f"Argument error, rerun with <julia> <number> <number>: {text!r}"
        )
    return body


def parse_double(text: str) -> float:
    """Parse a decimal number such as ``-0.8`` or ``+.156``.

    One optional sign may lead, followed by ASCII digits with at most one
    decimal point. Exponents and whitespace are rejected. Empty digit parts
    count as zero, so ``""`` and ``"-"`` parse to zero.
    """
    body = _validate(text)
    sign = -1.0 if text.startswith("-") else 1.0
    whole, _, fraction = body.partition(".")
    int_part = int(whole) if whole else 0
    fract = 0.0
    scale = 1.0
    for digit in fraction:
        scale /= 10
        fract += int(digit) * scale
    return (int_part + fract) * sign


def map_range(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``value`` from the range [0, old_max] linearly onto [new_min, new_max]."""
    return (new_max - new_min) * value / old_max + new_min