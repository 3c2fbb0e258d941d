"""Per-request orchestration: heuristic selection, responses, continuation and persistence."""

import copy
import json
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional

from valuefuzz.config import APP, build_store, get_engine_config
from valuefuzz.data_models import Request, Response, WarningsSection
from valuefuzz.exceptions import (
    DeleteFailedError,
    InvalidContinuationError,
    LoadFailedError,
    PersistFailedError,
    UnknownHeuristicError,
)
from valuefuzz.heuristics import ComposedHeuristic
from valuefuzz.heuristics.seeding import generate_seed
from valuefuzz.storage import ProcessorStore
from valuefuzz.utils.logger import get_logger, Logger
from valuefuzz.value_types import ValueType, get_value_type

logger = get_logger(__name__)


class ProcessorState(Enum):
    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    RESPONDED = "responded"


class RequestProcessor:
    """Turns one Request into a stream of responses.

    A processor owns a deep copy of its request, the composed heuristic built from
    it and the warnings collected while building it. Each ``build_response`` call
    pulls the values still allowed by ``max_values``; ``continue_request`` raises that
    bound so a later call resumes where the previous one stopped. The whole state
    can be written to a ProcessorStore and restored with ``load``.
    """

    def __init__(
        self,
        request: Request,
        processor_id: Optional[str] = None,
        store: Optional[ProcessorStore] = None,
    ):
        self.state = ProcessorState.UNINITIALIZED
        self.value_type: ValueType = get_value_type(request.type)

        self.request = copy.deepcopy(request)
        self.id = processor_id or self.request.id or str(uuid.uuid4())
        self.request.id = self.id
        if self.request.seed is None:
            self.request.seed = generate_seed()
        self.seed = self.request.seed
        self.max_values = self.request.max_values

        self.specification = self.value_type.build_specification(self.request.specification)
        self.warnings = WarningsSection()
        self.composed = ComposedHeuristic(self.seed)
        self.valid_values: List[Any] = []
        self._response: Optional[Response] = None
        self._store = store

        self.add_requested_generators()
        self.add_requested_operators()
        self.state = ProcessorState.CONFIGURED
        logger.info(
            f"Processor {self.id} configured for {self.request.name!r} "
            f"({self.value_type.name}, seed {self.seed}, heuristics: {Logger.format_names(self.composed.names)})"
        )

    @property
    def name(self) -> str:
        return self.request.name

    @property
    def emitted(self) -> int:
        return self.composed.emitted

    @property
    def store(self) -> ProcessorStore:
        if self._store is None:
            self._store = build_store(get_engine_config())
        return self._store

    # Heuristic selection

    def add_requested_generators(self) -> None:
        if self.request.no_generators:
            logger.debug(f"Processor {self.id}: generators disabled")
            return

        factory = self.value_type.generator_factory
        if not self.request.generators:
            self.composed.extend(self.value_type.default_generators(self.specification, self.seed))
            return

        for requested in self.request.generators:
            heuristic = factory.try_create(
                requested.name, requested.parameters, self.specification, self.seed
            )
            if heuristic is None:
                logger.warning(f"Processor {self.id}: unknown generator {requested.name!r}")
                self.warnings.add_illegal_generator(requested.name)
                continue
            self.composed.add(heuristic)

    def add_requested_operators(self) -> None:
        section = self.request.valid_values
        if section is None:
            return

        self.valid_values = self.value_type.parse_valid_values(section.values)
        dropped = len(section.values) - len(self.valid_values)
        if dropped:
            logger.debug(f"Processor {self.id}: dropped {dropped} unparseable valid values")

        factory = self.value_type.operator_factory
        if not section.operators:
            if self.valid_values:
                self.composed.extend(
                    self.value_type.default_operators(self.valid_values, self.specification, self.seed)
                )
            return

        for requested in section.operators:
            heuristic = factory.try_create(
                requested.name,
                requested.parameters,
                self.specification,
                self.seed,
                self.valid_values,
            )
            if heuristic is None:
                logger.warning(f"Processor {self.id}: unknown operator {requested.name!r}")
                self.warnings.add_illegal_operator(requested.name)
                continue
            self.composed.add(heuristic)

    # Responses

    def build_response(self) -> Response:
        """Build a new response from the current cursor.

        The header and warnings are always present. Values are only produced when
        the request validates; validation warnings and errors are reported either way.
        """
        validation = self.request.validate()
        response = self.build_response_header()
        if validation.is_valid:
            self.build_response_contents(response)
        else:
            logger.warning(f"Processor {self.id}: invalid request: {'; '.join(validation.errors)}")
        response.warnings.add_validation(validation)

        self._response = response
        self.state = ProcessorState.RESPONDED
        logger.info(
            f"Processor {self.id} responded with {len(response.values)} values "
            f"({self.emitted}/{self.max_values} emitted)"
        )
        return response

    def build_response_header(self) -> Response:
        return Response(
            name=self.request.name,
            id=self.id,
            seed=self.seed,
            type=self.value_type.name,
            warnings=self.warnings.copy(),
        )

    def build_response_contents(self, response: Response) -> None:
        bound = max(0, self.max_values - self.composed.emitted)
        response.values = self.composed.next(bound)
        if response.values:
            logger.debug(
                f"Processor {self.id}: first value {Logger.format_value(response.values[0].value)} "
                f"from {response.values[0].source_name}"
            )

    @property
    def response(self) -> Response:
        """The last built response, building one if none exists yet."""
        if self._response is None:
            return self.build_response()
        return self._response

    # Continuation

    def continue_request(self, new_request: Request) -> None:
        """Accept a later request for the same processor.

        Only the bound changes: heuristics are not selected again, and a smaller
        ``max_values`` than the current one is ignored.

        Raises:
            InvalidContinuationError: If name or id differ, or max_values is negative
        """
        if new_request.id != self.id:
            raise InvalidContinuationError(
                f"Request id {new_request.id!r} does not match processor {self.id}"
            )
        if new_request.name != self.request.name:
            raise InvalidContinuationError(
                f"Request name {new_request.name!r} does not match {self.request.name!r}"
            )
        if new_request.max_values < 0:
            raise InvalidContinuationError(f"max_values must not be negative, got {new_request.max_values}")

        if new_request.max_values < self.max_values:
            logger.warning(
                f"Processor {self.id}: keeping max_values {self.max_values}, "
                f"ignoring smaller value {new_request.max_values}"
            )
        else:
            self.max_values = new_request.max_values
            self.request.max_values = self.max_values

        self.state = ProcessorState.CONFIGURED
        logger.info(f"Processor {self.id} continued, max_values is now {self.max_values}")

    # Persistence

    def to_record(self) -> Dict[str, Any]:
        return {
            "format": APP.RECORD_FORMAT,
            "id": self.id,
            "type": self.value_type.name,
            "state": self.state.value,
            "seed": self.seed,
            "max_values": self.max_values,
            "request": self.request.to_dict(),
            "composed": self.composed.to_record(),
            "warnings": self.warnings.to_dict(),
        }

    def serialize(self) -> None:
        """Write the complete processor state to the store.

        Raises:
            PersistFailedError: If the state cannot be encoded or written
        """
        try:
            blob = json.dumps(self.to_record())
        except (TypeError, ValueError) as e:
            raise PersistFailedError(f"Could not encode processor {self.id}: {e}") from e
        try:
            self.store.put(self.id, blob)
        except ValueError as e:
            raise PersistFailedError(str(e)) from e
        logger.debug(f"Processor {self.id} persisted ({self.emitted} values emitted)")

    def delete(self) -> None:
        """Remove the persisted record of this processor.

        Raises:
            DeleteFailedError: If there was no record or it could not be removed
        """
        if not self.store.exists(self.id):
            raise DeleteFailedError(self.id, "no persisted record")
        if not self.store.delete(self.id):
            raise DeleteFailedError(self.id, "removal failed")
        logger.info(f"Processor {self.id} deleted")

    @classmethod
    def load(cls, processor_id: str, store: Optional[ProcessorStore] = None) -> 'RequestProcessor':
        """Restore a processor previously written with ``serialize``.

        Raises:
            LoadFailedError: With cause ``not_found`` when no record exists for the
                id, ``corrupt`` when the record cannot be decoded or replayed
        """
        if store is None:
            store = build_store(get_engine_config())

        try:
            blob = store.get(processor_id)
        except ValueError as e:
            raise LoadFailedError(processor_id, LoadFailedError.NOT_FOUND, str(e)) from e
        if blob is None:
            raise LoadFailedError(processor_id, LoadFailedError.NOT_FOUND)

        try:
            record = json.loads(blob)
            processor = cls._from_record(processor_id, record, store)
        except (ValueError, KeyError, TypeError, AttributeError, UnknownHeuristicError) as e:
            logger.error(f"Processor {processor_id} record is unusable: {e}")
            raise LoadFailedError(processor_id, LoadFailedError.CORRUPT, str(e)) from e

        logger.info(f"Processor {processor_id} restored ({processor.emitted} values emitted)")
        return processor

    @classmethod
    def _from_record(cls, processor_id: str, record: Dict[str, Any], store: ProcessorStore) -> 'RequestProcessor':
        if record["format"] != APP.RECORD_FORMAT:
            raise ValueError(f"unsupported record format {record['format']!r}")
        if record["id"] != processor_id:
            raise ValueError(f"record belongs to processor {record['id']!r}")

        processor = cls.__new__(cls)
        processor.value_type = get_value_type(record["type"])
        processor.request = Request.from_dict(record["request"])
        processor.id = processor_id
        processor.seed = int(record["seed"])
        processor.max_values = int(record["max_values"])
        processor.specification = processor.value_type.build_specification(processor.request.specification)

        section = processor.request.valid_values
        processor.valid_values = processor.value_type.parse_valid_values(section.values) if section else []

        processor.warnings = WarningsSection.from_dict(record["warnings"])
        processor.composed = ComposedHeuristic.from_record(
            record["composed"],
            processor.value_type.generator_factory,
            processor.value_type.operator_factory,
            processor.specification,
        )
        processor._response = None
        processor._store = store
        processor.state = ProcessorState(record["state"])
        return processor

    def __repr__(self) -> str:
        return (
            f"RequestProcessor(id={self.id!r}, name={self.request.name!r}, type={self.value_type.name!r}, "
            f"seed={self.seed}, max_values={self.max_values}, emitted={self.emitted}, "
            f"heuristics={self.composed.names})"
        )
