"""Key-value store interface for persisted request processors."""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

_VALID_KEY = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


class ProcessorStore(ABC):
    """Stores one opaque text record per processor id.

    Implementations raise PersistFailedError from ``put`` when a record cannot be
    written, return None from ``get`` when there is no record, raise LoadFailedError from
    ``get`` when a record exists but cannot be read, and return False
    from ``delete`` when there was nothing to remove or removal failed.
    """

    @abstractmethod
    def put(self, key: str, blob: str) -> None:
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    @staticmethod
    def check_key(key: str) -> str:
        """Reject keys that are not plain identifiers."""
        if not isinstance(key, str) or not _VALID_KEY.match(key):
            raise ValueError(f"Invalid processor id: {key!r}")
        return key
