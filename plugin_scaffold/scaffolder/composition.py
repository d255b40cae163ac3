"""Heuristic analysis of example credential values.

Infers the length, character classes and a possible token prefix (as made
popular by GitHub: ``ghp_``, ``github_pat_``, ``dop_v1_``, ``glpat-``) so the
generated credential type can be pre-filled with a value composition for a
human to review.
"""

from __future__ import annotations

import unicodedata

from .models import Charset, ValueComposition


# Values shorter than this are unlikely to carry a prefix.
PREFIX_MIN_LENGTH = 20

# A token prefix is unlikely to be longer than this.
PREFIX_WINDOW = 15

PREFIX_DELIMITERS = ("_", "-")


def analyze(sample: str) -> ValueComposition:
    """Return the ``ValueComposition`` of *sample*.

    Each character counts towards at most one class, checked in the order
    uppercase, lowercase, digit, symbol. Punctuation (including ``_`` and
    ``-``) and whitespace count towards none.
    """
    uppercase = lowercase = digits = symbols = False
    for char in sample:
        category = unicodedata.category(char)
        if category == "Lu":
            uppercase = True
        elif category == "Ll":
            lowercase = True
        elif category == "Nd":
            digits = True
        elif category.startswith("S"):
            symbols = True

    return ValueComposition(
        length=len(sample),
        charset=Charset(
            uppercase=uppercase,
            lowercase=lowercase,
            digits=digits,
            symbols=symbols,
        ),
        prefix=detect_prefix(sample),
    )


def detect_prefix(sample: str) -> str:
    """Guess the token prefix of *sample*, or return ``""``.

    The prefix must start with a lowercase letter and end with a delimiter
    inside the first ``PREFIX_WINDOW`` characters; everything after the last
    delimiter in that window is dropped.
    """
    if len(sample) < PREFIX_MIN_LENGTH:
        return ""

    window = sample[:PREFIX_WINDOW]
    if unicodedata.category(window[0]) != "Ll":
        return ""

    end = max(window.rfind(delimiter) for delimiter in PREFIX_DELIMITERS)
    if end < 0:
        return ""
    return window[: end + 1]
