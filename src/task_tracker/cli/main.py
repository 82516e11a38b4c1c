# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TaskManager, runs exactly one command and
returns the process exit code:
- 0: success
- 1: the task core reported an error (validation, not found, save failure)
- 2: command-line usage error
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.results import TaskError
from ..tasks.task_manager import TaskManager
from .bootstrap import create_manager
from .commands import UsageError, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TASK_ERROR = 1
EXIT_USAGE = 2


def run(manager: TaskManager, argv: Sequence[str]) -> int:
    """Run one command against `manager`, printing output; never raises for user errors."""
    try:
        reply = registry.handle(manager, argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE
    except TaskError as e:
        logger.debug("Command %s failed: %s", list(argv), e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TASK_ERROR

    print(reply)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(console_level=settings.console_log_level, log_dir=settings.log_dir)

    manager = create_manager(settings=settings)
    return run(manager, sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
