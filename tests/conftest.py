from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from readerrecs.catalog import BookRecord, Catalog, load_catalog


def make_book(book_id: str, genres: list[str], age_limit: int | None = None, rating: float | None = None, title: str | None = None) -> BookRecord:
    return BookRecord(id=book_id, title=title or book_id, genres=frozenset(genres), age_limit=age_limit, rating=rating)


@pytest.fixture(autouse=True)
def _clear_catalog_cache():
    load_catalog.cache_clear()
    yield
    load_catalog.cache_clear()


@pytest.fixture
def scifi_catalog() -> Catalog:
    return Catalog(
        [
            make_book("A", ["ScienceFiction"], age_limit=12, rating=4.5),
            make_book("B", ["ScienceFiction"], rating=4.8),
        ]
    )


@pytest.fixture
def mixed_catalog() -> Catalog:
    return Catalog(
        [
            make_book("unrated-early", ["Fantasy"]),
            make_book("four-a", ["Fantasy"], rating=4.0),
            make_book("adult", ["Fantasy"], age_limit=18, rating=5.0),
            make_book("four-b", ["ScienceFiction", "Fantasy"], age_limit=10, rating=4.0),
            make_book("zero", ["Fantasy"], rating=0.0),
            make_book("horror", ["Horror"], rating=4.9),
            make_book("unrated-late", ["ScienceFiction"], age_limit=13),
        ]
    )


@pytest.fixture
def write_catalog(tmp_path: Path):
    def _write(data: Any, name: str = "books.json") -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
