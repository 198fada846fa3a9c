import pytest

from career_recommender.errors import UnresolvedPathIdWarning
from career_recommender.naive_bayes import PATH_KEYS, CareerPathCandidate
from career_recommender.path_resolution import apply_path_ids, build_path_id_mapping
from career_recommender.records import CatalogEntry
from helpers import SEEDED_CATALOG


class TestBuildMappingByName:

    def test_seeded_catalog(self):
        mapping = build_path_id_mapping(SEEDED_CATALOG)
        assert mapping == {
            "fullstack": "p-fs",
            "datascience": "p-ds",
            "cloud": "p-cl",
            "mobile": "p-mo",
            "security": "p-se",
        }

    def test_first_match_wins(self):
        catalog = [
            CatalogEntry(id="a", name="Cloud Basics"),
            CatalogEntry(id="b", name="Cloud & DevOps"),
        ]
        assert build_path_id_mapping(catalog)["cloud"] == "a"

    def test_renamed_entry_is_unresolved(self):
        catalog = [CatalogEntry(id="x", name="Security Engineering", slug="security")]
        assert build_path_id_mapping(catalog)["security"] is None

    def test_is_idempotent(self):
        assert build_path_id_mapping(SEEDED_CATALOG) == build_path_id_mapping(SEEDED_CATALOG)

    def test_empty_catalog(self):
        assert build_path_id_mapping([]) == {k: None for k in PATH_KEYS}


class TestBuildMappingBySlug:

    def test_uses_slug_not_name(self):
        catalog = [CatalogEntry(id="x", name="Security Engineering", slug="security")]
        mapping = build_path_id_mapping(catalog, mode="slug")
        assert mapping["security"] == "x"
        assert mapping["fullstack"] is None

    def test_entries_without_slug_never_match(self):
        catalog = [CatalogEntry(id="x", name="Full Stack Development")]
        assert build_path_id_mapping(catalog, mode="slug")["fullstack"] is None

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            build_path_id_mapping(SEEDED_CATALOG, mode="fuzzy")


class TestApplyPathIds:

    def test_all_resolved(self):
        candidates = [CareerPathCandidate("mobile", 10.0, 0.6), CareerPathCandidate("cloud", 5.0, 0.4)]
        resolved, unresolved = apply_path_ids(candidates, build_path_id_mapping(SEEDED_CATALOG))
        assert [c.career_path_id for c in resolved] == ["p-mo", "p-cl"]
        assert unresolved == []
        # inputs untouched
        assert candidates[0].career_path_id is None

    def test_unresolved_keeps_internal_key_and_warns(self):
        candidates = [CareerPathCandidate("security", 10.0, 1.0)]
        with pytest.warns(UnresolvedPathIdWarning):
            resolved, unresolved = apply_path_ids(candidates, {"security": None})
        assert unresolved == ["security"]
        assert resolved[0].resolved is False
        assert resolved[0].display_id == "security"
