"""
Tests for catalog building, category access and search.
"""
import pytest
from price_catalog.catalog import (
    MAX_SEARCH_RESULTS,
    build_catalog,
    get_category,
    list_categories,
    search,
)
from price_catalog.errors import UnknownCategoryError

TAX = 0.115


@pytest.fixture
def sample_dir(write_json):
    write_json("bebidas.json", [{"name": "Cola", "price": 10}])
    write_json("lacteos.json", {"frescos": [{"name": "Leche", "price": 5}], "otros": "x"})
    return write_json.dir


class TestBuildCatalog:
    """Test building the category map from a directory."""

    def test_missing_dir(self, tmp_path):
        assert build_catalog(tmp_path / "does-not-exist", TAX) == {}

    def test_empty_dir(self, write_json):
        assert build_catalog(write_json.dir, TAX) == {}

    def test_examples(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        assert list(db) == ["bebidas", "lacteos_frescos"]
        assert db["bebidas"][0]["_id"] == "bebidas:0"
        assert db["bebidas"][0]["price_with_tax"] == 11.15
        assert len(db["lacteos_frescos"]) == 1

    def test_ignores_non_json_files(self, write_json):
        write_json("notas.txt", "[1, 2]")
        write_json("precios.json.bak", "[1, 2]")
        write_json("carnes.JSON", [{"name": "Res"}])
        assert list(build_catalog(write_json.dir, TAX)) == ["carnes"]

    def test_ignores_directories(self, write_json):
        (write_json.dir / "sub.json").mkdir()
        write_json("pan.json", [{"name": "Pan"}])
        assert list(build_catalog(write_json.dir, TAX)) == ["pan"]

    def test_broken_file_does_not_stop_build(self, write_json):
        write_json("a.json", [{"name": "A"}])
        write_json("b.json", "{ broken")
        write_json("c.json", [{"name": "C"}])
        db = build_catalog(write_json.dir, TAX)
        assert db["a"][0]["name"] == "A"
        assert db["b"] == []
        assert db["c"][0]["name"] == "C"

    def test_later_file_replaces_same_category(self, write_json):
        # "a.json" sorts before "a_x.json"
        write_json("a.json", {"x": [{"name": "from bucket"}, {"name": "second"}]})
        write_json("a_x.json", [{"name": "from file"}])
        db = build_catalog(write_json.dir, TAX)
        assert list(db) == ["a_x"]
        assert [r["name"] for r in db["a_x"]] == ["from file"]

    def test_idempotent(self, sample_dir):
        assert build_catalog(sample_dir, TAX) == build_catalog(sample_dir, TAX)

    def test_reads_fresh_each_time(self, write_json):
        write_json("pan.json", [{"name": "Pan"}])
        assert len(build_catalog(write_json.dir, TAX)["pan"]) == 1
        write_json("pan.json", [{"name": "Pan"}, {"name": "Torta"}])
        assert len(build_catalog(write_json.dir, TAX)["pan"]) == 2

    def test_returns_new_map(self, sample_dir):
        first = build_catalog(sample_dir, TAX)
        first["bebidas"].clear()
        assert len(build_catalog(sample_dir, TAX)["bebidas"]) == 1


class TestCategoryAccess:
    """Test listing and fetching categories."""

    def test_list_categories(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        assert list_categories(db) == ["bebidas", "lacteos_frescos"]

    def test_get_category(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        assert get_category(db, " bebidas ")[0]["name"] == "Cola"

    def test_unknown_category(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        with pytest.raises(UnknownCategoryError):
            get_category(db, "unknown")

    def test_empty_name(self):
        with pytest.raises(UnknownCategoryError):
            get_category({"": []}, "  ")

    def test_existing_empty_category(self):
        assert get_category({"vacia": []}, "vacia") == []


class TestSearch:
    """Test free-text search."""

    def test_example(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        for q in ("cola", "COLA", "  CoLa "):
            results = search(db, q)
            assert [r["_id"] for r in results] == ["bebidas:0"]

    def test_empty_query(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        assert search(db, "") == []
        assert search(db, "   ") == []
        assert search(db, None) == []

    def test_matches_any_field(self, sample_dir):
        db = build_catalog(sample_dir, TAX)
        assert [r["_id"] for r in search(db, "lacteos_frescos")] == ["lacteos_frescos:0"]
        assert [r["_id"] for r in search(db, "11.15")] == ["bebidas:0"]

    def test_non_ascii(self):
        db = {"cafe": [{"name": "Café Molido"}, {"name": "Te"}]}
        assert [r["name"] for r in search(db, "CAFÉ")] == ["Café Molido"]

    def test_order_follows_categories(self):
        db = {
            "b": [{"n": "x1"}],
            "a": [{"n": "x2"}, {"n": "y"}, {"n": "x3"}],
        }
        assert [r["n"] for r in search(db, "x")] == ["x1", "x2", "x3"]

    def test_cap(self):
        db = {
            "uno": [{"name": f"item {i}"} for i in range(700)],
            "dos": [{"name": f"item {i}"} for i in range(700)],
        }
        results = search(db, "item")
        assert len(results) == MAX_SEARCH_RESULTS == 1000
        assert results[-1] is db["dos"][299]

    def test_custom_limit(self):
        db = {"c": [{"name": "x"}] * 10}
        assert len(search(db, "x", limit=3)) == 3

    def test_unserializable_record_skipped(self):
        db = {"c": [{"name": "x", "tags": {"set"}}, {"name": "x ok"}]}
        assert [r["name"] for r in search(db, "x")] == ["x ok"]
