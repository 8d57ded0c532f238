"""
Book catalog backed by a JSON file (`books.json` at the project root by
default).

The catalog is loaded once, validated record by record, and then only read.
A catalog that cannot be loaded raises `CatalogError`; callers are expected
to treat that as fatal rather than per-request.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Protocol, Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from readerrecs.config import settings


class CatalogError(RuntimeError):
    """The catalog is missing or malformed."""


class BookRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    title: str | None = None
    genres: frozenset[str] = frozenset()
    age_limit: int | None = Field(default=None, ge=0, alias="ageLimit")
    rating: float | None = Field(default=None, allow_inf_nan=False)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("genres", mode="before")
    @classmethod
    def _single_genre(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    @property
    def label(self) -> str:
        if self.title and self.title.strip():
            return self.title.strip()
        return local_name(self.id)


def local_name(book_id: str) -> str:
    # "http://ontologies/books.owl#Dune" -> "Dune"
    tail = book_id.rstrip("#/")
    for sep in ("#", "/"):
        if sep in tail:
            tail = tail.rsplit(sep, 1)[1]
    return tail or book_id


def is_candidate(book: BookRecord, genre_ids: Iterable[str], max_age: int) -> bool:
    if book.genres.isdisjoint(genre_ids):
        return False
    return book.age_limit is None or book.age_limit <= max_age


class CatalogStore(Protocol):
    def query_candidates(self, genre_ids: Iterable[str], max_age: int) -> Sequence[BookRecord]: ...


class Catalog:
    """In-memory, read-only catalog. Iteration order is the file order."""

    def __init__(self, books: Iterable[BookRecord]):
        self._books = tuple(books)

    @property
    def books(self) -> tuple[BookRecord, ...]:
        return self._books

    def __len__(self) -> int:
        return len(self._books)

    def query_candidates(self, genre_ids: Iterable[str], max_age: int) -> list[BookRecord]:
        wanted = frozenset(genre_ids)
        return [b for b in self._books if is_candidate(b, wanted, max_age)]


def parse_catalog(data: Any, *, source: str = "<catalog>") -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError(f"{source}: expected a JSON object with a 'books' list")
    raw_books = data.get("books")
    if not isinstance(raw_books, list):
        raise CatalogError(f"{source}: 'books' must be a list")

    books: list[BookRecord] = []
    seen: set[str] = set()
    for i, raw in enumerate(raw_books):
        try:
            book = BookRecord.model_validate(raw)
        except ValidationError as e:
            raise CatalogError(f"{source}: invalid book record #{i}: {e}") from e
        if book.id in seen:
            raise CatalogError(f"{source}: duplicate book id {book.id!r}")
        seen.add(book.id)
        books.append(book)
    return Catalog(books)


@lru_cache(maxsize=4)
def load_catalog(path: Path | str | None = None) -> Catalog:
    path = Path(path) if path is not None else settings.CATALOG_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"catalog {path} is not valid JSON: {e}") from e
    catalog = parse_catalog(data, source=str(path))
    logger.info(f"Loaded {len(catalog)} books from {path}")
    return catalog
