# src/trip_planner/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.commands import render_view
from ..core.state import AppState
from ..tasks.task_api import search_tasks

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _ask(prompt: str) -> str:
    return input(prompt)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "trip-planner"))
    print(f"[{app_name}] Type /help for commands, plain text to search, /exit to quit.\n")
    print(render_view(state))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, ask=_ask)
            if response is None:
                # Plain text is a live search query.
                search_tasks(state.task_store, state.view, user_input)
                response = render_view(state)
        except (EOFError, KeyboardInterrupt):
            print("\nCancelled.")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        print(response)

    logger.info("Console connector finished.")
