"""Command-line interface for valuefuzz."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from valuefuzz.config import APP, DEFAULTS, EngineConfig, EngineConfigManager, build_store, parse_arguments
from valuefuzz.data_models import Request
from valuefuzz.dispatcher import RequestDispatcher
from valuefuzz.exceptions import FuzzingError
from valuefuzz.utils.logger import configure_logging, get_logger
from valuefuzz.value_types import get_value_type


def load_requests(path: Path, default_max_values: int) -> Union[Request, List[Request]]:
    """Read one request, or a list of requests, from a YAML or JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if isinstance(data, list):
        return [Request.from_dict(item, default_max_values) for item in data]
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a request mapping or a list of them")
    return Request.from_dict(data, default_max_values)


def write_output(payload: Any, output: str = None) -> None:
    text = json.dumps(payload, indent=DEFAULTS.JSON_INDENT)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding='utf-8')
    else:
        print(text)


def run_request(args, config: EngineConfig, logger) -> int:
    request_file = Path(args.request)
    if not request_file.exists():
        logger.error(f"Request file not found: {request_file}")
        return APP.EXIT_FAILURE

    try:
        requests = load_requests(request_file, config.default_max_values)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"Invalid request file {request_file}: {e}")
        return APP.EXIT_FAILURE

    dispatcher = RequestDispatcher(store=build_store(config), config=config)
    if isinstance(requests, list):
        responses = dispatcher.dispatch_all(requests)
        payload: Any = [response.to_dict() for response in responses]
    else:
        payload = dispatcher.dispatch(requests).to_dict()

    write_output(payload, args.output)
    return APP.EXIT_SUCCESS


def run_close(args, config: EngineConfig, logger) -> int:
    dispatcher = RequestDispatcher(store=build_store(config), config=config)
    dispatcher.close(args.close)
    logger.info(f"Closed processor {args.close}")
    write_output({"id": args.close, "closed": True}, args.output)
    return APP.EXIT_SUCCESS


def run_list_heuristics(args) -> int:
    description: Dict[str, Any] = get_value_type(args.list_heuristics).describe()
    write_output(description, args.output)
    return APP.EXIT_SUCCESS


def main(argv=None) -> int:
    """Run the CLI tool."""
    args = parse_arguments(argv)

    # Bootstrap logging before the config is read so config problems are reported
    configure_logging(level=args.log_level or DEFAULTS.LOG_LEVEL)
    logger = get_logger(__name__)

    try:
        manager = EngineConfigManager(args.config)
        config = manager.load_config()
        if args.store_dir:
            config = manager.update_config(storage_backend="file", storage_directory=args.store_dir)
    except (FuzzingError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.error(f"Failed to load configuration: {e}")
        return APP.EXIT_FAILURE

    configure_logging(
        level=args.log_level or config.log_level,
        log_to_file=config.log_to_file,
        log_dir=config.log_dir,
    )
    logger.debug(f"Storage backend: {config.storage_backend}")

    try:
        if args.list_heuristics:
            return run_list_heuristics(args)
        if args.close:
            return run_close(args, config, logger)
        return run_request(args, config, logger)
    except FuzzingError as e:
        logger.error(f"{e.error_code}: {e.message}")
        for suggestion in e.suggestions:
            logger.info(f"Suggestion: {suggestion}")
        return APP.EXIT_FAILURE
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return APP.EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
