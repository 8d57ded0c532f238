"""
Reader profile parsing.

A profile line looks like `Мне 13 лет, мне нравятся: фантастика, фэнтези`
or `I'm 13, I like: sci-fi, fantasy`: the age comes before the first comma,
the genre list follows the first colon after it.

Parsing is lenient and never raises. A missing or unreadable age becomes 0
and a missing list becomes empty; `recommend()` rejects such profiles.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loguru import logger

from readerrecs.genres import canonical_genres

_NON_DIGIT_RE = re.compile(r"[^0-9]+")


@dataclass(frozen=True)
class UserProfile:
    # age == 0 means "not given"; it is never a real query age.
    age: int
    genres: tuple[str, ...]

    @property
    def canonical_genres(self) -> tuple[str, ...]:
        return canonical_genres(self.genres)

    @property
    def is_complete(self) -> bool:
        return self.age != 0 and bool(self.genres)


def _extract_age(head: str) -> int:
    digits = _NON_DIGIT_RE.sub(" ", head).split()
    if not digits:
        return 0
    try:
        return int(digits[0])
    except ValueError:
        # int() refuses very long digit strings
        return 0


def _extract_genres(rest: str) -> tuple[str, ...]:
    _, colon, listed = rest.partition(":")
    if not colon:
        return ()
    genres = (g.strip().lower() for g in listed.split(","))
    # Blank pieces are dropped, so "13, likes:" has no genres and is rejected
    # as incomplete rather than as an unsupported genre.
    return tuple(g for g in genres if g)


def parse_profile(raw: str | None) -> UserProfile:
    head, _, rest = (raw or "").partition(",")
    profile = UserProfile(age=_extract_age(head), genres=_extract_genres(rest))
    logger.debug(f"Parsed profile {profile} from {raw!r}")
    return profile
