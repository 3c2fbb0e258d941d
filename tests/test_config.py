"""Tests for configuration loading and the argument parser."""

import pytest
import yaml

from valuefuzz.config import (
    DEFAULTS,
    STORAGE,
    EngineConfig,
    EngineConfigManager,
    build_store,
    parse_arguments,
)
from valuefuzz.exceptions import ConfigurationError
from valuefuzz.storage import FileProcessorStore, MemoryProcessorStore, SqliteProcessorStore


def write_config(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestEngineConfig:
    def test_defaults_are_valid(self):
        config = EngineConfig()
        assert config.validate().is_valid
        assert config.storage_backend == STORAGE.BACKEND
        assert config.default_max_values == DEFAULTS.MAX_VALUES

    def test_invalid_values(self):
        result = EngineConfig(storage_backend="s3", default_max_values=-1, log_level="LOUD").validate()
        assert not result.is_valid
        assert len(result.errors) == 3

    def test_memory_backend_warns(self):
        result = EngineConfig(storage_backend="memory").validate()
        assert result.is_valid
        assert result.has_warnings

    def test_to_dict_sections(self):
        assert set(EngineConfig().to_dict()) == {"storage", "processing", "logging"}


class TestBuildStore:
    def test_backends(self, tmp_path):
        assert isinstance(build_store(EngineConfig(storage_directory=str(tmp_path))), FileProcessorStore)
        assert isinstance(
            build_store(EngineConfig(storage_backend="sqlite", sqlite_path=str(tmp_path / "s.db"))),
            SqliteProcessorStore,
        )
        assert isinstance(build_store(EngineConfig(storage_backend="memory")), MemoryProcessorStore)


class TestEngineConfigManager:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = EngineConfigManager(str(tmp_path / "absent.yaml")).load_config()
        assert config == EngineConfig()

    def test_load(self, tmp_path):
        path = write_config(tmp_path / "config.yaml", {
            "storage": {"backend": "SQLite", "sqlite_path": "x.db"},
            "processing": {"persist_processors": False, "default_max_values": 7},
            "logging": {"level": "debug"},
        })
        config = EngineConfigManager(path).load_config()
        assert config.storage_backend == "sqlite"
        assert config.sqlite_path == "x.db"
        assert config.persist_processors is False
        assert config.default_max_values == 7
        assert config.log_level == "DEBUG"

    def test_env_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("VALUEFUZZ_TEST_DIR", str(tmp_path / "from-env"))
        monkeypatch.delenv("VALUEFUZZ_UNSET", raising=False)
        path = write_config(tmp_path / "config.yaml", {
            "storage": {"directory": "${VALUEFUZZ_TEST_DIR}", "sqlite_path": "${VALUEFUZZ_UNSET}"},
        })
        config = EngineConfigManager(path).load_config()
        assert config.storage_directory == str(tmp_path / "from-env")
        assert config.sqlite_path == STORAGE.SQLITE_PATH

    def test_invalid_config_raises(self, tmp_path):
        path = write_config(tmp_path / "config.yaml", {"storage": {"backend": "tape"}})
        with pytest.raises(ConfigurationError):
            EngineConfigManager(path).load_config()

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            EngineConfigManager(str(path)).load_config()

    def test_broken_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("storage: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            EngineConfigManager(str(path)).load_config()

    def test_config_is_cached(self, tmp_path):
        manager = EngineConfigManager(str(tmp_path / "absent.yaml"))
        assert manager.get_config() is manager.get_config()

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "out" / "config.yaml"
        manager = EngineConfigManager(str(path))
        manager.save_config(EngineConfig(storage_backend="memory", default_max_values=3))
        reloaded = EngineConfigManager(str(path)).load_config()
        assert reloaded.storage_backend == "memory"
        assert reloaded.default_max_values == 3

    def test_update_config(self, tmp_path):
        manager = EngineConfigManager(str(tmp_path / "absent.yaml"))
        updated = manager.update_config(storage_directory="elsewhere")
        assert updated.storage_directory == "elsewhere"
        assert manager.get_config() is updated
        with pytest.raises(ConfigurationError):
            manager.update_config(colour="blue")
        with pytest.raises(ConfigurationError):
            manager.update_config(storage_backend="tape")


class TestArgumentParser:
    def test_request(self):
        args = parse_arguments(["--request", "r.yaml", "--log-level", "DEBUG", "-o", "out.json"])
        assert args.request == "r.yaml"
        assert args.log_level == "DEBUG"
        assert args.output == "out.json"
        assert args.close is None

    def test_actions_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_arguments(["--request", "r.yaml", "--close", "abc"])

    def test_an_action_is_required(self):
        with pytest.raises(SystemExit):
            parse_arguments([])
