"""Status transition table.

Only ``to-do -> done`` is forbidden. Reverting a finished task is allowed.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

from .errors import InvalidTransitionError
from .models import TaskStatus

ALLOWED_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.TODO: frozenset({TaskStatus.TODO, TaskStatus.IN_PROGRESS}),
    TaskStatus.IN_PROGRESS: frozenset(
        {TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE}
    ),
    TaskStatus.DONE: frozenset({TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE}),
}

# Forward step offered by the client's action button.
FORWARD_STEPS: Dict[TaskStatus, Optional[TaskStatus]] = {
    TaskStatus.TODO: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.DONE,
    TaskStatus.DONE: None,
}


def can_transition(current: TaskStatus, target: TaskStatus) -> bool:
    """Return True if a task in ``current`` may move to ``target``."""
    return target in ALLOWED_TRANSITIONS[current]


def ensure_transition(current: TaskStatus, target: TaskStatus) -> None:
    """Raise InvalidTransitionError if the edge is forbidden."""
    if not can_transition(current, target):
        raise InvalidTransitionError()


def next_status(current: TaskStatus) -> Optional[TaskStatus]:
    """Return the next forward status, or None for a finished task."""
    return FORWARD_STEPS[current]
