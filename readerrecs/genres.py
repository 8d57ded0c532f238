"""
Genre vocabulary.

Maps the genre words a reader types to the canonical genre ids used by the
catalog (`Fantasy`, `ScienceFiction`, ...). Lookup is exact: no stemming and
no fuzzy matching, so an unknown word simply maps to nothing.
"""

from __future__ import annotations

from typing import Iterable

GENRE_MAP: dict[str, str] = {
    "фэнтези": "Fantasy",
    "фантастика": "ScienceFiction",
    "классика": "Classic",
    "детектив": "Detective",
    "роман": "Romance",
    "ужасы": "Horror",
    "приключения": "Adventure",
    "драма": "Drama",
    "комедия": "Comedy",
    "мистика": "Mystery",
    "боевик": "Action",
    "трагедия": "Tragedy",
    "поэзия": "Poetry",
    "fantasy": "Fantasy",
    "science fiction": "ScienceFiction",
    "sci-fi": "ScienceFiction",
    "scifi": "ScienceFiction",
    "classic": "Classic",
    "classics": "Classic",
    "detective": "Detective",
    "romance": "Romance",
    "horror": "Horror",
    "adventure": "Adventure",
    "drama": "Drama",
    "comedy": "Comedy",
    "mystery": "Mystery",
    "action": "Action",
    "tragedy": "Tragedy",
    "poetry": "Poetry",
}


def normalize_genre(token: str) -> str | None:
    return GENRE_MAP.get(token.lower())


def canonical_genres(tokens: Iterable[str]) -> tuple[str, ...]:
    # Unmapped words are dropped; first occurrence wins.
    seen: set[str] = set()
    out: list[str] = []
    for t in tokens:
        g = normalize_genre(t)
        if g is None or g in seen:
            continue
        seen.add(g)
        out.append(g)
    return tuple(out)


def supported_genres() -> tuple[str, ...]:
    return tuple(sorted(GENRE_MAP))
