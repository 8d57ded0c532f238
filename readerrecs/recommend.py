"""
RecommendBooks

Purpose:
- Turn a parsed reader profile into an age-appropriate, rating-ordered list
  of books from the catalog.

How to think about this module
------------------------------
`recommend()` never raises for bad input; it returns one of the values in
`readerrecs.outcomes`.

`recommend_books` wraps parse -> recommend -> render as a LangChain tool.
"""

from __future__ import annotations

from typing import Iterable

from langchain.tools import tool
from loguru import logger

from readerrecs.catalog import BookRecord, CatalogError, CatalogStore, is_candidate, load_catalog
from readerrecs.outcomes import InvalidInput, NoMappedGenres, NoMatches, Outcome, Recommendation, Success
from readerrecs.presenter import render
from readerrecs.profile import UserProfile, parse_profile

__all__ = [
    "InvalidInput",
    "NoMappedGenres",
    "NoMatches",
    "Outcome",
    "Recommendation",
    "Success",
    "rank_books",
    "recommend",
    "recommend_books",
]


def _rating_key(book: BookRecord) -> tuple[bool, float]:
    # Unrated books go after every rated one, including ones rated 0.
    if book.rating is None:
        return (True, 0.0)
    return (False, -book.rating)


def rank_books(books: Iterable[BookRecord]) -> list[BookRecord]:
    # sorted() is stable, so ties keep catalog order.
    return sorted(books, key=_rating_key)


def recommend(profile: UserProfile, catalog: CatalogStore) -> Outcome:
    if not profile.is_complete:
        logger.info(f"Rejected incomplete profile: age={profile.age}, genres={list(profile.genres)}")
        return InvalidInput(age=profile.age, genres=profile.genres)

    genre_ids = profile.canonical_genres
    if not genre_ids:
        logger.info(f"No supported genres in {list(profile.genres)}")
        return NoMappedGenres(age=profile.age, genres=profile.genres)

    # Stores may return a superset; the candidate rule is enforced here.
    candidates: list[BookRecord] = []
    seen: set[str] = set()
    for b in catalog.query_candidates(genre_ids, profile.age):
        if b.id in seen or not is_candidate(b, genre_ids, profile.age):
            continue
        seen.add(b.id)
        candidates.append(b)

    logger.debug(f"{len(candidates)} candidates for genres={list(genre_ids)}, age<={profile.age}")
    if not candidates:
        return NoMatches(age=profile.age, genres=profile.genres, genre_ids=genre_ids)

    return Success(recommendations=tuple(Recommendation.from_book(b) for b in rank_books(candidates)))


@tool
def recommend_books(user_request: str) -> str:
    """
    Recommend age-appropriate books for a reader profile.

    Input contract
    --------------
    - `user_request`: one line such as "I'm 13, I like: sci-fi, fantasy"
      (age before the first comma, genres after the colon).

    Output contract
    ---------------
    - A numbered list of books, best rated first, or a short message saying
      why nothing could be recommended.

    Calling convention
    ------------------
    - `recommend_books.invoke({"user_request": "..."})`
    """
    try:
        catalog = load_catalog()
    except CatalogError as e:
        logger.error(f"Catalog unavailable: {e}")
        return "I can't load the book catalog right now, I'm afraid."

    return render(recommend(parse_profile(user_request), catalog))
