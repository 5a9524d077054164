import argparse
import json
import logging
from pathlib import Path

CONFIG_FILE_PATH = "hooks.ini"
LOG_LEVEL = logging.INFO


def payload_type(input):
    """Verify the payload input is a JSON object"""
    try:
        payload = json.loads(input)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Payload must be valid JSON, but got '{input}'")

    if not isinstance(payload, dict):
        raise argparse.ArgumentTypeError(f"Payload must be a JSON object, but got {input}")

    return payload


class ArgsNamespace(argparse.Namespace):
    """Provides typehints to the input args"""

    event: str | None
    config_file_path: str
    data: dict
    list: bool
    log_level: int
    log_dir: Path | None


def parse_args(argv: list[str] | None = None) -> ArgsNamespace:
    parser = argparse.ArgumentParser(
        prog="hookstack", description="Run a named event from a hook config file."
    )

    parser.add_argument(
        "event",
        nargs="?",
        help="Name of the event to run",
        default=None,
    )
    parser.add_argument(
        "-c",
        "--config-file-path",
        help=f"Path to the INI file defining event hooks. (default: {CONFIG_FILE_PATH})",
        default=CONFIG_FILE_PATH,
        required=False,
    )
    parser.add_argument(
        "-d",
        "--data",
        help="JSON object passed to every callback as the shared payload. (default: {})",
        default="{}",
        type=payload_type,
        required=False,
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the configured events and their callbacks, then exit.",
        required=False,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help=f"Logging level int value (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). (default: {LOG_LEVEL} )",
        default=LOG_LEVEL,
        type=int,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory to write log files to. Logs only go to the console when unset.",
        default=None,
        type=Path,
        required=False,
    )

    args = parser.parse_args(argv, namespace=ArgsNamespace())

    if args.event is None and not args.list:
        parser.error("an event name is required unless --list is given")

    return args
