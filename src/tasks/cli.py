#!/usr/bin/env python3
"""
Task tracker terminal client.

Talks to the task API over HTTP and re-renders the full list after every
change.

Usage:
    python -m src.tasks list [--format json|text]
    python -m src.tasks add "Title"
    python -m src.tasks advance ID
    python -m src.tasks delete ID [--yes]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional

from src.task_tracker import Config, setup_logger

from .board import TaskBoard, action_label, status_label
from .client import TaskApiClient, TaskApiError
from .models import Task


def format_task_text(task: Task) -> str:
    """Render one task as a table row."""
    return f"{task.id}  {status_label(task.status):<12} {action_label(task.status):<6} {task.title}"


def format_task_json(task: Task) -> Dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "status": task.status.value,
        "createdAt": task.created_at,
        "updatedAt": task.updated_at,
    }


def render(tasks: List[Task], output_format: str) -> None:
    """Print the whole task list."""
    if output_format == "json":
        print(json.dumps([format_task_json(task) for task in tasks], ensure_ascii=False))
        return
    print(f"{'ID':<32}  {'Status':<12} {'Action':<6} Title")
    if not tasks:
        print("No tasks available")
    for task in tasks:
        print(format_task_text(task))


def cmd_list(board: TaskBoard, output_format: str) -> int:
    render(board.refresh(), output_format)
    return 0


def cmd_add(board: TaskBoard, title: str, output_format: str) -> int:
    if not title.strip():
        print("Error: Title is required", file=sys.stderr)
        return 1
    board.add(title)
    render(board.tasks, output_format)
    return 0


def cmd_advance(board: TaskBoard, task_id: str, output_format: str) -> int:
    board.refresh()
    updated = board.advance(task_id)
    if updated is None:
        print(f"Task {task_id} is already done.", file=sys.stderr)
    render(board.tasks, output_format)
    return 0


def cmd_delete(
    board: TaskBoard,
    task_id: str,
    output_format: str,
    assume_yes: bool,
    confirm: Callable[[str], str] = input,
) -> int:
    if not assume_yes:
        answer = confirm("Are you sure you want to delete this task? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled.", file=sys.stderr)
            return 0
    board.remove(task_id)
    render(board.tasks, output_format)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Task tracker client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api-url", help="Task API URL (default: from config/app_config.yaml)")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run", required=True)

    subparsers.add_parser("list", help="Show all tasks")

    parser_add = subparsers.add_parser("add", help="Create a task")
    parser_add.add_argument("title", help="Task title")

    parser_advance = subparsers.add_parser("advance", help="Start or finish a task")
    parser_advance.add_argument("id", help="Task ID")

    parser_delete = subparsers.add_parser("delete", help="Delete a task")
    parser_delete.add_argument("id", help="Task ID")
    parser_delete.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    config = Config.load()
    setup_logger(log_level=config.log_level, log_file=config.log_file)

    client = TaskApiClient(
        api_url=args.api_url or config.client.api_url,
        timeout=config.client.timeout_seconds,
    )
    board = TaskBoard(client)

    try:
        if args.command == "list":
            return cmd_list(board, args.format)
        elif args.command == "add":
            return cmd_add(board, args.title, args.format)
        elif args.command == "advance":
            return cmd_advance(board, args.id, args.format)
        elif args.command == "delete":
            return cmd_delete(board, args.id, args.format, args.yes)
        else:
            print(f"Error: unknown command: {args.command}", file=sys.stderr)
            return 1
    except TaskApiError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
