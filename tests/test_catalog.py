import pytest

from readerrecs.catalog import BookRecord, Catalog, CatalogError, is_candidate, load_catalog, local_name, parse_catalog

from conftest import make_book


def test_record_reads_json_keys():
    b = BookRecord.model_validate({"id": 7, "title": "Dune", "genres": "ScienceFiction", "ageLimit": 12, "rating": 4.5})
    assert b.id == "7"
    assert b.genres == frozenset({"ScienceFiction"})
    assert b.age_limit == 12
    assert b.rating == 4.5


def test_optional_fields_default_to_none():
    b = BookRecord.model_validate({"id": "x", "genres": ["Drama"]})
    assert b.title is None
    assert b.age_limit is None
    assert b.rating is None


@pytest.mark.parametrize(
    "book_id, expected",
    [
        ("http://ontologies/books.owl#Roadside_Picnic", "Roadside_Picnic"),
        ("http://example.org/books/dune", "dune"),
        ("plain-id", "plain-id"),
    ],
)
def test_local_name(book_id, expected):
    assert local_name(book_id) == expected


def test_label_falls_back_to_id():
    assert BookRecord(id="http://ontologies/books.owl#Solaris").label == "Solaris"
    assert BookRecord(id="s1", title="  ").label == "s1"
    assert BookRecord(id="s1", title=" Solaris ").label == "Solaris"


def test_is_candidate_rules():
    kids = make_book("kids", ["Fantasy"], age_limit=6)
    teen = make_book("teen", ["Fantasy"], age_limit=13)
    adult = make_book("adult", ["Fantasy"], age_limit=18)
    open_ = make_book("open", ["Fantasy"])
    assert is_candidate(kids, {"Fantasy"}, 13)
    assert is_candidate(teen, {"Fantasy"}, 13)
    assert not is_candidate(adult, {"Fantasy"}, 13)
    assert is_candidate(open_, {"Fantasy"}, 13)
    assert not is_candidate(open_, {"Horror"}, 13)


def test_query_candidates_filters_and_keeps_order(mixed_catalog):
    ids = [b.id for b in mixed_catalog.query_candidates(["Fantasy"], 13)]
    assert ids == ["unrated-early", "four-a", "four-b", "zero"]


def test_query_candidates_is_repeatable(mixed_catalog):
    first = mixed_catalog.query_candidates({"ScienceFiction"}, 13)
    assert mixed_catalog.query_candidates({"ScienceFiction"}, 13) == first


def test_load_catalog_from_file(write_catalog):
    path = write_catalog(
        {
            "books": [
                {"id": "a", "title": "A", "genres": ["ScienceFiction"], "ageLimit": 12, "rating": 4.5},
                {"id": "b", "genres": ["Fantasy"], "extra": "ignored"},
            ]
        }
    )
    catalog = load_catalog(path)
    assert isinstance(catalog, Catalog)
    assert len(catalog) == 2
    assert [b.id for b in catalog.books] == ["a", "b"]
    assert load_catalog(path) is catalog


def test_default_catalog_loads():
    catalog = load_catalog()
    assert len(catalog) > 0


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CatalogError, match="cannot read"):
        load_catalog(tmp_path / "nope.json")


def test_bad_json_is_fatal(write_catalog):
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(write_catalog("{not json"))


@pytest.mark.parametrize(
    "data, message",
    [
        ([], "expected a JSON object"),
        ({}, "'books' must be a list"),
        ({"books": {"id": "a"}}, "'books' must be a list"),
        ({"books": [{"title": "no id"}]}, "invalid book record #0"),
        ({"books": [{"id": "a", "ageLimit": -1}]}, "invalid book record #0"),
        ({"books": [{"id": "a", "rating": "great"}]}, "invalid book record #0"),
        ({"books": [{"id": "a", "rating": float("nan")}]}, "invalid book record #0"),
        ({"books": [{"id": "a", "rating": float("inf")}]}, "invalid book record #0"),
        ({"books": [{"id": "a"}, {"id": "a"}]}, "duplicate book id"),
    ],
)
def test_malformed_catalogs_are_rejected(data, message):
    with pytest.raises(CatalogError, match=message):
        parse_catalog(data)


def test_nan_rating_in_file_is_fatal(write_catalog):
    path = write_catalog('{"books": [{"id": "a", "rating": 3.0}, {"id": "n", "rating": NaN}]}')
    with pytest.raises(CatalogError, match="invalid book record #1"):
        load_catalog(path)
