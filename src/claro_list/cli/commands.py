# src/claro_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.state import AppState
from ..folders.errors import ValidationError
from ..folders.folder_models import Task
from ..folders.task_repo import find_task

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /folders, ...)."""

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

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        ValidationError from a handler becomes the reply (user-facing alert).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return await handler(state, args)
        except ValidationError as e:
            return f"[!] {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _task_line(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.name}  ({task.id})"


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_folders(state: AppState, args: list[str]) -> str:
    doc = await state.board.mount()
    if not doc:
        return "No folders. Create one with /folder <name>."
    lines = ["Folders:"]
    for i, folder in enumerate(doc, start=1):
        lines.append(f"{i}. {folder.name} [{len(folder.tasks)} tasks]  ({folder.id})")
    return "\n".join(lines)


async def cmd_folder(state: AppState, args: list[str]) -> str:
    """/folder <name> -> create a folder"""
    doc = await state.board.create_or_rename_folder(" ".join(args))
    return f"Folder created: {doc[-1].name} ({doc[-1].id})"


async def cmd_rename(state: AppState, args: list[str]) -> str:
    """/rename <folder_id> <name>"""
    if len(args) < 2:
        return "Usage: /rename <folder_id> <new name>"
    folder_id, name = args[0], " ".join(args[1:])
    await state.board.mount()
    if state.board.folder_tasks(folder_id) is None:
        return f"No folder with id {folder_id}."
    await state.board.create_or_rename_folder(name, folder_id)
    return "Folder renamed."


async def cmd_rmfolder(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rmfolder <folder_id>"
    before = await state.board.mount()
    after = await state.board.delete_folder(args[0])
    if after is before:
        return f"No folder with id {args[0]}."
    return "Folder deleted (with its tasks)."


async def cmd_open(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /open <folder_id>"
    await state.board.mount()
    opened = state.board.folder_tasks(args[0])
    if opened is None:
        return f"No folder with id {args[0]}."
    folder, tasks = opened
    if not tasks:
        return f"{folder.name}: no tasks."
    return "\n".join([f"{folder.name}:"] + [f"  {_task_line(t)}" for t in tasks])


async def cmd_task(state: AppState, args: list[str]) -> str:
    """/task <folder_id> <name> -> add a task to a folder"""
    if not args:
        return "Usage: /task <folder_id> <task name>"
    folder_id, name = args[0], " ".join(args[1:])
    await state.board.add_task(folder_id, name)
    return "Task added."


async def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <task_id> -> toggle completion"""
    if len(args) != 1:
        return "Usage: /done <task_id>"
    doc = await state.board.toggle_task(args[0])
    found = find_task(doc, args[0])
    if found is None:
        return f"No task with id {args[0]}."
    return "Completed." if found[1].completed else "Marked as not completed."


async def cmd_rmtask(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rmtask <task_id>"
    before = await state.board.mount()
    after = await state.board.delete_task(args[0])
    if after is before:
        return f"No task with id {args[0]}."
    return "Task deleted."


async def cmd_all(state: AppState, args: list[str]) -> str:
    entries = await state.all_tasks.activate()
    if not entries:
        return "No tasks found"
    lines = ["All tasks:"]
    for e in entries:
        mark = "x" if e.completed else " "
        lines.append(f"  [{mark}] {e.name}  ({e.id} in {e.folder_id})")
    return "\n".join(lines)


async def cmd_reload(state: AppState, args: list[str]) -> str:
    doc = await state.board.reload()
    return f"Reloaded: {len(doc)} folders."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("folders", cmd_folders, help_text="List folders.", aliases=["ls"])
registry.register("folder", cmd_folder, help_text="Create a folder: /folder <name>.")
registry.register("rename", cmd_rename, help_text="Rename a folder: /rename <folder_id> <name>.")
registry.register("rmfolder", cmd_rmfolder, help_text="Delete a folder and its tasks.")
registry.register("open", cmd_open, help_text="Show the tasks of one folder: /open <folder_id>.")
registry.register("task", cmd_task, help_text="Add a task: /task <folder_id> <name>.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <task_id>.")
registry.register("rmtask", cmd_rmtask, help_text="Delete a task: /rmtask <task_id>.")
registry.register("all", cmd_all, help_text="All tasks across folders.")
registry.register("reload", cmd_reload, help_text="Re-read the document from disk.")
