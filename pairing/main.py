"""Main module entrypoint for local runtime execution.

This module validates metadata files from the command line or launches the
FastAPI service that discloses the local identity record.
"""

import argparse
import json
import sys
from pathlib import Path

import uvicorn

from pairing.bootstrap import bootstrap_configure_logging, bootstrap_create_application
from pairing.config import SettingsLoadError, config_load_log_level, config_load_settings
from pairing.domain import AppMetadataError, domain_app_metadata_from_json


def main(argv: list[str] | None = None) -> int:
    """Run selected runtime command.

    Args:
        argv: Optional argument vector; defaults to process arguments.

    Returns:
        int: Process exit code.
    """

    argument_parser = argparse.ArgumentParser(description="Pairing metadata runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "validate"),
        help="Runtime command: `api` starts server, `validate` checks one metadata JSON file",
        type=str,
    )
    argument_parser.add_argument("path", nargs="?", type=Path, help="Metadata JSON file for `validate`")
    argument_parser.add_argument(
        "--include-none",
        dest="include_none",
        action="store_true",
        help="Emit absent optional fields as explicit nulls",
    )
    argument_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "validate":
        try:
            log_level = "DEBUG" if parsed_arguments.verbose else config_load_log_level()
        except SettingsLoadError as error:
            print(str(error), file=sys.stderr)
            return 1
        bootstrap_configure_logging(log_level)
        if parsed_arguments.path is None:
            argument_parser.error("validate requires a metadata file path")
        return main_validate_file(parsed_arguments.path, include_none=parsed_arguments.include_none)

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        print(str(error), file=sys.stderr)
        return 1
    bootstrap_configure_logging("DEBUG" if parsed_arguments.verbose else settings.log_level)
    try:
        application = bootstrap_create_application(settings)
    except SettingsLoadError as error:
        print(str(error), file=sys.stderr)
        return 1
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )
    return 0


def main_validate_file(path: Path, include_none: bool = False) -> int:
    """Decode one metadata file and print its normalized wire form.

    Args:
        path: JSON file holding one metadata record.
        include_none: Emit absent optional fields as explicit nulls.

    Returns:
        int: `0` when the record is valid, `1` otherwise.
    """

    try:
        payload = path.read_bytes()
    except OSError as error:
        print(f"Cannot read {path}: {error}", file=sys.stderr)
        return 1

    try:
        metadata = domain_app_metadata_from_json(payload)
    except AppMetadataError as error:
        print(f"{type(error).__name__}: {error}", file=sys.stderr)
        return 1

    print(json.dumps(metadata.encode(include_none=include_none), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
