"""
Result values for one recommendation request.

Every request ends in exactly one of:
- `InvalidInput`: no usable age, or no genres at all
- `NoMappedGenres`: genres were given but none are in our vocabulary
- `NoMatches`: a valid query that the catalog cannot satisfy
- `Success`: one or more recommendations, best rated first
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from readerrecs.catalog import BookRecord


@dataclass(frozen=True)
class Recommendation:
    label: str
    age_limit: int | None
    rating: float | None
    book_id: str

    @classmethod
    def from_book(cls, book: BookRecord) -> "Recommendation":
        return cls(label=book.label, age_limit=book.age_limit, rating=book.rating, book_id=book.id)


@dataclass(frozen=True)
class InvalidInput:
    age: int
    genres: tuple[str, ...]


@dataclass(frozen=True)
class NoMappedGenres:
    age: int
    genres: tuple[str, ...]


@dataclass(frozen=True)
class NoMatches:
    age: int
    genres: tuple[str, ...]
    genre_ids: tuple[str, ...]


@dataclass(frozen=True)
class Success:
    recommendations: tuple[Recommendation, ...]


Outcome = Union[InvalidInput, NoMappedGenres, NoMatches, Success]
