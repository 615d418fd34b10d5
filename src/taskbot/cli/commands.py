# src/taskbot/cli/commands.py

"""
Command interpretation: one input line -> (action, body) -> reply text.

  <action> [body...]

The first whitespace-delimited token names the action (case-insensitive);
unknown words map to Action.INVALID. Everything after it is the body.
"""

from __future__ import annotations

import logging

from ..core.actions import Action
from ..core.result import Err, Ok, Result, empty_description
from ..core.state import AppState

logger = logging.getLogger(__name__)


def parse_action(line: str) -> Action:
    parts = line.split(maxsplit=1)
    if not parts:
        return Action.INVALID
    try:
        return Action(parts[0].upper())
    except ValueError:
        return Action.INVALID


def extract_body(line: str) -> Result[str]:
    """Return the text after the action word, or an Empty-Description error."""
    parts = line.split(maxsplit=1)
    if len(parts) != 2:
        return empty_description()
    return Ok(parts[1].strip())


def handle_line(state: AppState, line: str) -> str:
    """
    Interpret one line and return the reply.

    BYE moves the session to TERMINATED; every other action keeps it running.
    """
    action = parse_action(line)
    logger.debug("Command action=%s", action.value)

    body = ""
    if action.needs_body:
        match extract_body(line):
            case Ok(value=text):
                body = text
            case Err(error=error):
                return error.message

    response = state.manager.execute(action, body)
    if action is Action.BYE:
        state.terminate()
    return response
