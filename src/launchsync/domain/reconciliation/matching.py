"""Fuzzy matching of registry launch names against manifest payload labels."""

from __future__ import annotations

import re
from typing import Final

from rapidfuzz import fuzz, utils

PERFECT_SCORE: Final = 100
# Names in this family are substrings of each other (Starlink 2 / Starlink 23).
_STRICT_NAME_PATTERN: Final = re.compile(r"starlink", re.IGNORECASE)
# Group ids such as "4-5" or "v1.5" stay single tokens in strict comparisons.
_TOKEN_SEPARATORS: Final = re.compile(r"[()&,]")


def partial_score(name: str, label: str) -> float:
    """Best alignment score of the shorter string inside the longer one."""

    return fuzz.partial_ratio(name, label, processor=utils.default_process)


def group_tokens(text: str) -> str:
    """Lower-case ``text`` and split it on whitespace and list punctuation only."""

    return " ".join(_TOKEN_SEPARATORS.sub(" ", text).lower().split())


def token_score(name: str, label: str) -> float:
    return fuzz.token_set_ratio(name, label, processor=group_tokens)


def partial_match(name: str, label: str) -> bool:
    return partial_score(name, label) == PERFECT_SCORE


def requires_strict_match(name: str) -> bool:
    return _STRICT_NAME_PATTERN.search(name) is not None


def matches(name: str, label: str) -> bool:
    """Return whether the manifest ``label`` refers to the registry launch ``name``.

    Partial containment must be perfect: close is not enough, otherwise ``SSO-A``
    would pick up the ``SSO-B`` row. Starlink-like names must additionally match
    token for token so that ``Starlink 2`` claims neither ``Starlink 23`` nor
    ``Starlink 2-3``.
    """

    if not partial_match(name, label):
        return False
    if requires_strict_match(name):
        return token_score(name, label) == PERFECT_SCORE
    return True


__all__ = [
    "PERFECT_SCORE",
    "matches",
    "partial_match",
    "partial_score",
    "group_tokens",
    "requires_strict_match",
    "token_score",
]
