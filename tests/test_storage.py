"""Tests for the processor stores."""

import sqlite3

import pytest

from valuefuzz.exceptions import LoadFailedError, PersistFailedError
from valuefuzz.storage import FileProcessorStore, SqliteProcessorStore


class TestProcessorStores:
    def test_put_get(self, any_store):
        any_store.put("abc-1", '{"a": 1}')
        assert any_store.get("abc-1") == '{"a": 1}'
        assert any_store.exists("abc-1")

    def test_get_missing(self, any_store):
        assert any_store.get("nothing") is None
        assert not any_store.exists("nothing")

    def test_put_overwrites(self, any_store):
        any_store.put("key", "first")
        any_store.put("key", "second")
        assert any_store.get("key") == "second"
        assert any_store.keys() == ["key"]

    def test_delete(self, any_store):
        any_store.put("key", "value")
        assert any_store.delete("key") is True
        assert any_store.delete("key") is False
        assert any_store.get("key") is None

    def test_keys_sorted(self, any_store):
        for key in ("b", "a", "c.1"):
            any_store.put(key, key)
        assert any_store.keys() == ["a", "b", "c.1"]

    @pytest.mark.parametrize("key", ["", "../x", "a/b", ".hidden", "with space", "x" * 200])
    def test_invalid_keys(self, any_store, key):
        with pytest.raises(ValueError):
            any_store.put(key, "value")
        with pytest.raises(ValueError):
            any_store.get(key)


class TestFileProcessorStore:
    def test_layout(self, tmp_path):
        store = FileProcessorStore(str(tmp_path / "state"), extension=".json")
        store.put("p1", "{}")
        assert (tmp_path / "state" / "p1.json").read_text(encoding="utf-8") == "{}"
        assert store.path_for("p1") == tmp_path / "state" / "p1.json"

    def test_keys_ignore_other_files(self, tmp_path):
        store = FileProcessorStore(str(tmp_path))
        store.put("p1", "{}")
        (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
        assert store.keys() == ["p1"]

    def test_no_temporary_files_left(self, tmp_path):
        store = FileProcessorStore(str(tmp_path))
        store.put("p1", "{}")
        assert [p.name for p in tmp_path.iterdir()] == ["p1.processor.json"]

    def test_keys_of_missing_directory(self, tmp_path):
        assert FileProcessorStore(str(tmp_path / "absent")).keys() == []

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        store = FileProcessorStore(str(blocker / "sub"))
        with pytest.raises(PersistFailedError):
            store.put("p1", "{}")

    def test_undecodable_record(self, tmp_path):
        store = FileProcessorStore(str(tmp_path))
        store.path_for("p1").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(LoadFailedError) as exc_info:
            store.get("p1")
        assert exc_info.value.corrupt
        assert store.exists("p1")


class TestSqliteProcessorStore:
    def test_schema(self, tmp_path):
        SqliteProcessorStore(str(tmp_path / "db" / "state.db"))
        conn = sqlite3.connect(tmp_path / "db" / "state.db")
        try:
            columns = [row[1] for row in conn.execute("PRAGMA table_info(processors)")]
        finally:
            conn.close()
        assert columns == ["id", "state", "created_at", "updated_at"]

    def test_records_survive_reopen(self, tmp_path):
        path = str(tmp_path / "state.db")
        SqliteProcessorStore(path).put("p1", "{}")
        assert SqliteProcessorStore(path).get("p1") == "{}"

    def test_update_keeps_created_at(self, tmp_path):
        path = tmp_path / "state.db"
        store = SqliteProcessorStore(str(path))
        store.put("p1", "one")
        conn = sqlite3.connect(path)
        try:
            created = conn.execute("SELECT created_at FROM processors WHERE id = 'p1'").fetchone()[0]
            store.put("p1", "two")
            row = conn.execute("SELECT state, created_at FROM processors WHERE id = 'p1'").fetchone()
        finally:
            conn.close()
        assert row == ("two", created)
