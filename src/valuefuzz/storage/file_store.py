"""One file per processor, named after its id."""

import os
import tempfile
from pathlib import Path
from typing import List, Optional

from valuefuzz.exceptions import LoadFailedError, PersistFailedError
from valuefuzz.utils.logger import get_logger
from .base_store import ProcessorStore

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".processor.json"


class FileProcessorStore(ProcessorStore):
    """Stores each record as ``<directory>/<id><extension>``."""

    def __init__(self, directory: str = "processors", extension: str = DEFAULT_EXTENSION) -> None:
        self.directory = Path(directory)
        self.extension = extension

    def path_for(self, key: str) -> Path:
        return self.directory / f"{self.check_key(key)}{self.extension}"

    def put(self, key: str, blob: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write to a sibling file first so a reader never sees half a record
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(blob)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
                raise
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise PersistFailedError(f"Could not write processor {key} to {path}: {e}") from e
        logger.debug(f"Wrote {len(blob)} bytes to {path}")

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise LoadFailedError(key, LoadFailedError.CORRUPT, str(e)) from e

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def delete(self, key: str) -> bool:
        path = self.path_for(key)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            logger.error(f"Failed to delete {path}: {e}")
            return False
        return True

    def keys(self) -> List[str]:
        if not self.directory.exists():
            return []
        return sorted(
            p.name[:-len(self.extension)]
            for p in self.directory.iterdir()
            if p.is_file() and p.name.endswith(self.extension)
        )
