"""In-process store, mostly for tests and short-lived dispatchers."""

import threading
from typing import Dict, List, Optional

from .base_store import ProcessorStore


class MemoryProcessorStore(ProcessorStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[str, str] = {}

    def put(self, key: str, blob: str) -> None:
        self.check_key(key)
        with self._lock:
            self._records[key] = blob

    def get(self, key: str) -> Optional[str]:
        self.check_key(key)
        with self._lock:
            return self._records.get(key)

    def delete(self, key: str) -> bool:
        self.check_key(key)
        with self._lock:
            return self._records.pop(key, None) is not None

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._records)
