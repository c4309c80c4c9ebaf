#!/usr/bin/env python3
"""
Catalog, Audit Store, and Server Config Tests

Run:
----
    pytest server/tests/test_catalog_stores.py -v
"""

import json

import pytest

from retrieval.errors import CatalogUnavailableError
from retrieval.models.detection import DetectionAudit
from server.config import ServerConfig
from server.services import InMemoryCatalog, JsonCatalog, JsonlAuditStore, NullAuditStore
from server.state import AppState


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "workouts": [
            {"id": "w1", "durationMinutes": 20, "equipment": ["Mat"], "bodyParts": ["core"]},
            {"title": "no id"},
            {"id": "w2", "level": "expert"},
        ],
        "recipes": [
            {"id": "r1", "title": "Rice Bowl", "timeMinutes": 15, "difficulty": "Easy",
             "ingredients": ["rice", {"name": "Eggs"}]},
            {"id": "r2", "title": "Broken", "timeMinutes": 0},
        ],
    }))
    return path


class TestJsonCatalog:
    def test_loads_valid_rows_and_skips_invalid(self, catalog_file):
        catalog = JsonCatalog(catalog_file)
        assert [w.id for w in catalog.workouts] == ["w1"]
        assert [r.id for r in catalog.recipes] == ["r1"]

    def test_queries(self, catalog_file):
        catalog = JsonCatalog(catalog_file)
        assert [w.id for w in catalog.fetch_workouts_by_equipment("MAT")] == ["w1"]
        assert [r.id for r in catalog.fetch_recipes_by_any_ingredient(["Eggs"])] == ["r1"]
        assert catalog.fetch_recipes_by_any_ingredient([" "]) == []
        assert [r.id for r in catalog.fetch_recipes_by_time_and_difficulty(20, "easy")] == ["r1"]
        assert catalog.fetch_recipes_by_time_and_difficulty(10, "easy") == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogUnavailableError):
            JsonCatalog(tmp_path / "missing.json")

    def test_wrong_shape_payloads_do_not_drop_recipe(self):
        catalog = InMemoryCatalog(recipes=[
            {"id": "r1", "title": "Toast", "timeMinutes": 5, "difficulty": "easy", "nutrition": [1, 2]},
            {"id": "r2", "title": "Eggs", "timeMinutes": 8, "difficulty": "easy", "steps": {"1": "whisk"}},
        ])
        assert [r.id for r in catalog.recipes] == ["r1", "r2"]

    def test_non_object_payload(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(CatalogUnavailableError):
            JsonCatalog(path)


class TestAuditStores:
    def test_jsonl_appends_one_line_per_record(self, tmp_path):
        store = JsonlAuditStore(tmp_path / "audit" / "detections.jsonl")
        store.save(DetectionAudit(kind="workout_image", raw_hints=["mat"], normalized={"equipment": "mat"}))
        store.save(DetectionAudit(kind="recipe_image"))
        lines = store.path.read_text().splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["kind"] == "workout_image"
        assert first["normalized"] == {"equipment": "mat"}
        assert "image_url" not in first

    def test_null_store_discards(self):
        NullAuditStore().save(DetectionAudit(kind="workout_image"))


class TestServerConfig:
    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CATALOG_JSON_PATH", str(tmp_path / "catalog.json"))
        monkeypatch.delenv("AUDIT_LOG_PATH", raising=False)
        monkeypatch.delenv("RETRIEVAL_CONFIG_PATH", raising=False)
        config = ServerConfig.from_env()
        assert config.port == 9001
        assert config.log_level == "DEBUG"
        assert config.catalog_json_path == tmp_path / "catalog.json"
        assert config.audit_log_path is None

    def test_validate_reports_missing_files(self, tmp_path):
        ok, errors = ServerConfig(catalog_json_path=tmp_path / "nope.json").validate()
        assert not ok
        assert len(errors) == 1

    def test_retrieval_config_file(self, tmp_path):
        path = tmp_path / "retrieval.json"
        path.write_text(json.dumps({"recipes": {"recipe_result_limit": 5}}))
        config = ServerConfig(retrieval_config_path=path).load_retrieval_config()
        assert config.recipe_result_limit == 5


class TestAppState:
    def test_defaults_to_empty_catalog(self):
        state = AppState(ServerConfig())
        assert isinstance(state.catalog, InMemoryCatalog)
        assert state.is_loaded

    def test_bad_catalog_path_leaves_state_unloaded(self, tmp_path):
        state = AppState(ServerConfig(catalog_json_path=tmp_path / "missing.json"))
        assert state.catalog is None
        assert not state.is_loaded

    def test_audit_log_path_selects_jsonl(self, tmp_path):
        state = AppState(ServerConfig(audit_log_path=tmp_path / "a.jsonl"))
        assert isinstance(state.audit_store, JsonlAuditStore)
