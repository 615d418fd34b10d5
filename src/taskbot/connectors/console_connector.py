# src/taskbot/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def welcome_text(app_name: str) -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> None:
    """
    Read one command per line until BYE (or EOF / Ctrl+C).

    Each reply is printed followed by a divider.
    """
    app_name = str(getattr(state.settings, "app_name", "taskbot"))
    logger.info("Console connector started.")

    write(DIVIDER)
    write(welcome_text(app_name))
    for error in state.manager.load_errors:
        write(error.message)
    write(DIVIDER)

    while state.running:
        try:
            line = read_line("")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        write(handle_line(state, line))
        write(DIVIDER)

    logger.info("Console connector finished (status=%s).", state.status.value)
