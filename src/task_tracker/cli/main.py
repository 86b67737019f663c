# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, makes sure the task file exists,
then runs exactly one command:

    task <command> [arguments]
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..errors import TaskTrackerError, ValidationError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def _print_error(exc: Exception) -> int:
    # OSError carries the filename in str(exc); TaskTrackerError is already user text.
    logger.debug("Command failed", exc_info=True)
    print(f"Error: {exc}")
    return EXIT_ERROR


def _require_text(args: Sequence[str]) -> None:
    # Undecodable argv bytes arrive as lone surrogates and cannot be written back as UTF-8.
    for arg in args:
        try:
            arg.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError("Arguments must be valid UTF-8 text.") from None


def run(argv: Sequence[str], store: TaskStore) -> int:
    """
    Dispatch argv (argv[0] is the program name) to a command handler.

    Handler errors are printed as "Error: <message>"; nothing escapes
    except programming errors.
    """
    try:
        _require_text(argv[1:])
    except ValidationError as exc:
        return _print_error(exc)

    name = argv[1] if len(argv) > 1 else None
    args = list(argv[2:])

    if name is None or name == "help":
        print(registry.build_help())
        return EXIT_OK

    cmd = registry.get(name)
    if cmd is None or cmd.handler is None:
        print(f"Unknown command: {name}")
        print(registry.build_help())
        return EXIT_OK

    logger.debug("Running command=%s args=%s file=%s", name, args, store.path)
    try:
        output = cmd.handler(store, args)
    except (TaskTrackerError, OSError, ValueError) as exc:
        # ValueError: UnicodeEncodeError when stored text holds lone surrogates
        return _print_error(exc)

    print(output)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    settings = get_settings()
    store = TaskStore(settings.tasks_file)
    try:
        setup_logging(console_level=settings.console_log_level, log_file=settings.log_file)
        store.ensure_initialized()
    except OSError as exc:
        return _print_error(exc)

    return run(argv, store)


if __name__ == "__main__":
    sys.exit(main())
