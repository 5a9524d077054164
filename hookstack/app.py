import json
import logging
import sys

from hookstack.lib.events import EventRegistry
from hookstack.lib.hook_config import HookConfig
from hookstack.lib.logger import configure_logger
from hookstack.lib.parse_args import parse_args


def describe_callback(callback) -> str:
    module = getattr(callback, "__module__", None)
    name = getattr(callback, "__qualname__", None) or repr(callback)
    return f"{module}:{name}" if module else name


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logger(log_level=args.log_level, log_dir=args.log_dir)

    registry = EventRegistry()
    count = HookConfig(args.config_file_path).load(registry)
    logging.info(f"Registered {count} hook(s) from {args.config_file_path}")

    if args.list:
        for name in registry.names():
            print(name)
            for callback in registry.get(name):
                print(f"    {describe_callback(callback)}")
        return 0

    if not registry.get(args.event):
        logging.error(f"No hooks registered for event: {args.event}")
        return 1

    payload = args.data
    registry.run(args.event, payload)
    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
