"""Command-line argument parsing."""

import argparse
from .constants import DEFAULTS, APP


class ArgumentParserBuilder:
    """Builder for creating argument parser with fluent interface."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="valuefuzz",
            description="valuefuzz - deterministic, resumable fuzz value generation",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_usage_examples()
        )
        self._add_core_arguments()
        self._add_optional_arguments()

    def _add_core_arguments(self) -> None:
        """Add the mutually exclusive actions."""
        actions = self.parser.add_mutually_exclusive_group(required=True)
        actions.add_argument(
            '--request', '-r',
            type=str,
            help='Request file (YAML or JSON); a request with an id continues that processor'
        )
        actions.add_argument(
            '--close',
            type=str,
            metavar='ID',
            help='Delete the persisted processor with this id'
        )
        actions.add_argument(
            '--list-heuristics',
            type=str,
            metavar='TYPE',
            help='List the generators and operators of a value type and exit'
        )

    def _add_optional_arguments(self) -> None:
        """Add optional configuration arguments."""
        self.parser.add_argument(
            '--config', '-c',
            type=str,
            default=None,
            help=f'Configuration file (default: {DEFAULTS.CONFIG_FILE})'
        )

        self.parser.add_argument(
            '--store-dir',
            type=str,
            default=None,
            help='Directory for persisted processors; selects the file backend'
        )

        self.parser.add_argument(
            '--output', '-o',
            type=str,
            default=None,
            help='Write the JSON response to this file instead of stdout'
        )

        self.parser.add_argument(
            '--log-level',
            type=str,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            default=None,
            help=f'Logging level (default: from config, else {DEFAULTS.LOG_LEVEL})'
        )

        self.parser.add_argument(
            '--version', '-V',
            action='version',
            version=APP.VERSION
        )

    def _get_usage_examples(self) -> str:
        """Get formatted usage examples."""
        return """
Examples:
  # Generate values for a new request
  valuefuzz --request requests/port.yaml

  # Ask for more values: set the id from the first response and raise max_values
  valuefuzz --request requests/port-continued.yaml

  # Drop the persisted state of a request
  valuefuzz --close 6f1c2d0e-5a7b-4c55-9a51-2f3f1f0b9c11

  # Show the available integer heuristics
  valuefuzz --list-heuristics integer
        """

    def build(self) -> argparse.ArgumentParser:
        """Build and return the configured parser."""
        return self.parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments using builder pattern."""
    parser = ArgumentParserBuilder().build()
    return parser.parse_args(argv)
