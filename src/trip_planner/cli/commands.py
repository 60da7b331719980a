# src/trip_planner/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.ports import Prompt
from ..core.state import AppState
from ..errors import ValidationError
from ..tasks.task_api import create_task, delete_task, delete_task_at, find_task, search_tasks, update_task
from ..tasks.task_forms import TaskForm, parse_changes
from ..tasks.task_models import EDITABLE_FIELDS, Task

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Prompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Prompt | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, ask)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_task_line(position: int, task: Task) -> str:
    box = "[x]" if task.done else "[ ]"
    mark = " !" if task.important else ""
    category = task.category or task.category_group.value
    return f"{position}. {box}{mark} #{task.id} {task.title} | {category} | {task.date}"


def render_task_detail(task: Task) -> str:
    return (
        f"Task #{task.id}\n"
        f"  Title: {task.title}\n"
        f"  Category: {task.category or task.category_group.value}\n"
        f"  Date: {task.date}\n"
        f"  Budget: {task.budget:.2f}\n"
        f"  Important: {'yes' if task.important else 'no'}\n"
        f"  Done: {'yes' if task.done else 'no'}\n"
        f"  Notes: {task.notes}"
    )


def render_view(state: AppState) -> str:
    view = state.view
    total = len(view.full_tasks())
    if not total:
        return "No tasks yet. Use /add to create one."
    header = f"Tasks ({view.count()} of {total})"
    if view.query.strip():
        header += f", filter: {view.query.strip()!r}"
    if not view.count():
        return header + ":\n  (no matches)"
    lines = [header + ":"]
    for i, task in enumerate(view, start=1):
        lines.append("  " + render_task_line(i, task))
    return "\n".join(lines)


# ---- argument helpers ----


def _parse_id(raw: str) -> int:
    s = raw.strip().lstrip("#").rstrip(".")
    if not s.isdigit():
        raise ValidationError(f"Invalid id: {raw}")
    return int(s)


def _parse_assignments(args: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for arg in args:
        if "=" not in arg:
            raise ValidationError(f"Expected field=value, got {arg!r}")
        key, value = arg.split("=", 1)
        out[key.strip().lower()] = value
    return out


def _reload_view(state: AppState) -> None:
    state.view.refresh(state.task_store.load_all())


def _ask_form_values(ask: Prompt) -> dict[str, str]:
    return {
        "title": ask("Title: "),
        "category": ask("Category (Flight/Hotel/Packing/Other) [Other]: "),
        "date": ask("Date (dd/MM/yyyy): "),
        "budget": ask("Budget [0]: "),
        "important": ask("Important? [y/N]: "),
        "done": ask("Done? [y/N]: "),
        "notes": ask("Notes: "),
    }


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    query = state.view.query.strip() or "-"
    return (
        "Status:\n"
        f"  Data file: {store.prefs.path}\n"
        f"  Stored tasks: {store.count()}\n"
        f"  Shown: {state.view.count()} (filter: {query})"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    _reload_view(state)
    return render_view(state)


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search <text>  -> show tasks whose title, category or date contains text
    /search         -> clear the filter
    """
    search_tasks(state.task_store, state.view, " ".join(args))
    return render_view(state)


def cmd_add(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /add title="Book hotel" category=Hotel date=12/05/2024 [budget=120] [important=yes] [done=no] [notes=...]
    /add            -> interactive prompts (console only)
    """
    if args:
        values = _parse_assignments(args)
    elif ask is not None:
        values = _ask_form_values(ask)
    else:
        return "Usage: /add title=... date=dd/MM/yyyy [category=...] [budget=...] [important=yes] [notes=...]"

    form = TaskForm.from_mapping(values)
    task = create_task(state.task_store, form)
    _reload_view(state)
    return f"Task added: #{task.id} {task.title}"


def cmd_show(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /show <id>"
    task_id = _parse_id(args[0])
    task = find_task(state.task_store.load_all(), task_id)
    if task is None:
        return f"Task id {task_id} not found."
    return render_task_detail(task)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> field=value ...  (fields not given keep their values)"""
    if len(args) < 2:
        return f"Usage: /edit <id> field=value ...  fields: {', '.join(EDITABLE_FIELDS)}"
    task_id = _parse_id(args[0])
    changes = parse_changes(_parse_assignments(args[1:]))
    task = update_task(state.task_store, task_id, **changes)
    if task is None:
        return f"Task id {task_id} not found."
    _reload_view(state)
    return f"Task updated: #{task.id} {task.title}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task_id = _parse_id(args[0])
    current = find_task(state.task_store.load_all(), task_id)
    if current is None:
        return f"Task id {task_id} not found."
    task = update_task(state.task_store, task_id, done=not current.done)
    _reload_view(state)
    if task is None:
        return f"Task id {task_id} not found."
    return f"Task #{task.id} marked as {'done' if task.done else 'not done'}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"
    task_id = _parse_id(args[0])
    removed = delete_task(state.task_store, task_id)
    _reload_view(state)
    if removed is None:
        return f"Task id {task_id} not found."
    return f'Task "{removed.title}" deleted.'


def cmd_rmi(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /rmi <n>        -> delete the n-th task of the current list (asks for confirmation)
    /rmi <n> --yes  -> delete without asking
    """
    flags = {a for a in args if a.startswith("-")}
    rest = [a for a in args if not a.startswith("-")]
    if len(rest) != 1 or not rest[0].rstrip(".").isdigit():
        return "Usage: /rmi <n> [--yes]"
    position = int(rest[0].rstrip("."))
    view = state.view
    if position < 1 or position > view.count():
        return f"No task #{position} in the list."

    task = view.item_at(position - 1)
    confirmed = bool(flags & {"-y", "--yes"})
    if not confirmed:
        if ask is None:
            return f'Add --yes to delete "{task.title}".'
        answer = ask(f'Delete "{task.title}"? [y/N]: ').strip().lower()
        confirmed = answer in ("y", "yes")
    if not confirmed:
        return "Cancelled."

    removed = delete_task_at(state.task_store, view, position - 1)
    if removed is None:
        return f"Task id {task.id} not found."
    return f'Task "{removed.title}" deleted.'


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show data file and task counts.")
registry.register("list", cmd_list, help_text="Reload and show tasks (keeps the current filter).", aliases=["ls"])
registry.register("search", cmd_search, help_text="Filter by title/category/date: /search <text> (empty clears).", aliases=["s"])
registry.register("add", cmd_add, help_text="Add a task: /add title=... date=dd/MM/yyyy [category=...] ...")
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> field=value ...")
registry.register("done", cmd_done, help_text="Toggle done: /done <id>.")
registry.register("rm", cmd_rm, help_text="Delete by id: /rm <id>.")
registry.register("rmi", cmd_rmi, help_text="Delete the n-th listed task: /rmi <n> [--yes].")
