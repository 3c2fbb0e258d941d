"""Shared fixtures for the valuefuzz test suite."""

import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from valuefuzz.config import EngineConfig  # noqa: E402
from valuefuzz.data_models import Request, ValidValuesSection, GeneratorRequest, OperatorRequest  # noqa: E402
from valuefuzz.storage import FileProcessorStore, MemoryProcessorStore, SqliteProcessorStore  # noqa: E402
from valuefuzz.utils.logger import configure_logging  # noqa: E402


def make_request(name="port", generators=None, values=None, operators=None, **kwargs) -> Request:
    """Build a request with a fixed seed unless one is given."""
    kwargs.setdefault("seed", 1234)
    valid_values = None
    if values is not None or operators is not None:
        valid_values = ValidValuesSection(
            values=list(values or []),
            operators=[OperatorRequest(operator) for operator in operators or []],
        )
    return Request(
        name=name,
        generators=[GeneratorRequest(generator) for generator in generators or []],
        valid_values=valid_values,
        **kwargs,
    )


@pytest.fixture(autouse=True)
def quiet_logging():
    # Handlers bind to the current sys.stderr, which pytest swaps per test
    configure_logging(level="WARNING")


@pytest.fixture
def memory_store():
    return MemoryProcessorStore()


@pytest.fixture
def file_store(tmp_path):
    return FileProcessorStore(str(tmp_path / "processors"))


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteProcessorStore(str(tmp_path / "valuefuzz.db"))


@pytest.fixture(params=["memory", "file", "sqlite"])
def any_store(request, tmp_path):
    if request.param == "file":
        return FileProcessorStore(str(tmp_path / "processors"))
    if request.param == "sqlite":
        return SqliteProcessorStore(str(tmp_path / "valuefuzz.db"))
    return MemoryProcessorStore()


@pytest.fixture
def memory_config():
    return EngineConfig(storage_backend="memory")
