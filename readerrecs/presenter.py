"""Text rendering for recommendation outcomes."""

from __future__ import annotations

from readerrecs.genres import supported_genres
from readerrecs.outcomes import InvalidInput, NoMappedGenres, NoMatches, Outcome, Recommendation, Success

UNSPECIFIED = "unspecified"
EXAMPLE_PROFILE = "I'm 13, I like: science fiction, fantasy"


def _fmt_genres(genres: tuple[str, ...]) -> str:
    return "[" + ", ".join(genres) + "]"


def _fmt_rating(rating: float | None) -> str:
    return UNSPECIFIED if rating is None else f"{rating:g}"


def format_recommendation(i: int, r: Recommendation) -> str:
    age = UNSPECIFIED if r.age_limit is None else str(r.age_limit)
    return f"{i}) {r.label} (ageLimit: {age}, rating: {_fmt_rating(r.rating)})"


def render(outcome: Outcome) -> str:
    if isinstance(outcome, Success):
        lines = ["Book recommendations:"]
        lines.extend(format_recommendation(i, r) for i, r in enumerate(outcome.recommendations, 1))
        return "\n".join(lines)
    if isinstance(outcome, InvalidInput):
        age = outcome.age if outcome.age else "missing"
        return (
            f"Couldn't read that profile (age: {age}, genres: {_fmt_genres(outcome.genres)}). "
            f"Example: {EXAMPLE_PROFILE}"
        )
    if isinstance(outcome, NoMappedGenres):
        return (
            f"None of the genres {_fmt_genres(outcome.genres)} are supported. "
            f"Try one of: {', '.join(supported_genres())}"
        )
    if isinstance(outcome, NoMatches):
        return (
            f"No recommendations found for your preferences "
            f"(age {outcome.age}, genres {_fmt_genres(outcome.genres)})."
        )
    raise TypeError(f"unknown outcome: {outcome!r}")
