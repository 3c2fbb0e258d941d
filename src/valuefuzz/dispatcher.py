"""Routes requests to new or restored processors."""

import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from valuefuzz.config import EngineConfig, build_store, get_engine_config
from valuefuzz.data_models import Request, Response
from valuefuzz.exceptions import DeleteFailedError, LoadFailedError
from valuefuzz.processor import RequestProcessor
from valuefuzz.storage import ProcessorStore
from valuefuzz.utils.logger import get_logger

logger = get_logger(__name__)


class RequestDispatcher:
    """Front door for requests against one ProcessorStore.

    A request without an id starts a new processor; a request with an id continues
    the persisted processor of that id. Operations on the same id are serialized,
    operations on different ids are not.
    """

    def __init__(self, store: Optional[ProcessorStore] = None, config: Optional[EngineConfig] = None):
        self.config = config or get_engine_config()
        self.store = store or build_store(self.config)
        # id -> [lock, number of callers holding or waiting for it]
        self._locks: Dict[str, List] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _locked(self, processor_id: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.setdefault(processor_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[processor_id]

    def dispatch(self, request: Request) -> Response:
        """Answer a new or continued request.

        Raises:
            LoadFailedError: If a continued request names an unknown or unreadable processor
            InvalidContinuationError: If a continued request does not match its processor
            PersistFailedError: If the processor state cannot be written
        """
        if request.id is None:
            processor = RequestProcessor(request, store=self.store)
            with self._locked(processor.id):
                return self._respond(processor)

        with self._locked(request.id):
            processor = RequestProcessor.load(request.id, self.store)
            processor.continue_request(request)
            return self._respond(processor)

    def _respond(self, processor: RequestProcessor) -> Response:
        response = processor.build_response()
        if self.config.persist_processors:
            processor.serialize()
        return response

    def dispatch_all(self, requests: Iterable[Request]) -> List[Response]:
        return [self.dispatch(request) for request in requests]

    def close(self, processor_id: str) -> None:
        """Delete the persisted processor ``processor_id``.

        Raises:
            DeleteFailedError: If there is no such processor or it cannot be removed
        """
        with self._locked(processor_id):
            try:
                processor = RequestProcessor.load(processor_id, self.store)
            except LoadFailedError as e:
                if e.not_found:
                    raise DeleteFailedError(processor_id, "no persisted record") from e
                logger.warning(f"Removing unreadable record of processor {processor_id}")
                if not self.store.delete(processor_id):
                    raise DeleteFailedError(processor_id, "removal failed") from e
                return
            processor.delete()
