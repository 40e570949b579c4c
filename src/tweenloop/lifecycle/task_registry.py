"""
Task Registry
-------------

Centralized tracking of asyncio tasks spawned for running animations.

Features:
- Register tasks with metadata (category, description)
- Track creation time, completion state, cancellation, errors
- Bounded history of finished tasks for debugging
"""

from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any, Deque, Dict, List, Optional

from tweenloop.models.enums import LogCategory
from tweenloop.utils.logger import get_logger

log = get_logger().for_category(LogCategory.TASK)


class TaskCategory(Enum):
    """Logical grouping of asynchronous tasks."""
    ANIMATION = auto()


@dataclass(frozen=True)
class TaskInfo:
    """Immutable metadata captured at task creation time."""
    id: int
    category: TaskCategory
    description: str
    created_at: str  # ISO UTC string


@dataclass
class TaskRecord:
    """Internal structure tracking task state."""
    task: asyncio.Task
    info: TaskInfo
    cancelled: bool = False
    finished_with_error: Optional[BaseException] = None
    finished_return: Optional[Any] = None


class TaskRegistry:
    """
    Global registry for animation tasks.

    Responsibilities:
    - Track running tasks and metadata
    - Detect and log task failures
    - Keep a bounded history of finished tasks for debugging

    Animations are short-lived and started over and over, so finished records
    move into a ring buffer of `history_size` entries instead of accumulating.
    """

    _instance: Optional["TaskRegistry"] = None

    def __init__(self, history_size: int = 64) -> None:
        self._active: Dict[asyncio.Task, TaskRecord] = {}
        self._history: Deque[TaskRecord] = deque(maxlen=history_size)
        self._next_id: int = 1

    @classmethod
    def instance(cls) -> "TaskRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(
        self,
        task: asyncio.Task,
        category: TaskCategory,
        description: str,
    ) -> int:
        """Register a new task with metadata."""
        task_id = self._next_id
        self._next_id += 1

        info = TaskInfo(
            id=task_id,
            category=category,
            description=description,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._active[task] = TaskRecord(task=task, info=info)

        log.debug(f"[Task {task_id}] Registered ({category.name}) - {description}")

        task.add_done_callback(self._on_task_done)
        return task_id

    def _on_task_done(self, task: asyncio.Task) -> None:
        """Internal callback whenever a task finishes."""
        record = self._active.pop(task, None)
        if record is None:
            return
        self._history.append(record)

        if task.cancelled():
            record.cancelled = True
            log.debug(f"[Task {record.info.id}] Cancelled")
            return

        exc = task.exception()
        if exc:
            record.finished_with_error = exc
            log.error(
                f"[Task {record.info.id}] FAILED: {exc}",
                error_type=type(exc).__name__
            )
        else:
            record.finished_return = task.result()
            log.debug(f"[Task {record.info.id}] Completed successfully")

    # -----------------------------
    # Public API
    # -----------------------------

    def list_all(self) -> List[TaskRecord]:
        """Running tasks followed by the retained finished ones."""
        return list(self._active.values()) + list(self._history)

    def active(self) -> List[TaskRecord]:
        """Return only tasks that are still running."""
        return list(self._active.values())

    def failed(self) -> List[TaskRecord]:
        return [r for r in self._history if r.finished_with_error is not None]

    def cancelled(self) -> List[TaskRecord]:
        return [r for r in self._history if r.cancelled]

    def forget_finished(self) -> int:
        """Drop records of finished tasks, returns how many were removed."""
        count = len(self._history)
        self._history.clear()
        return count

    def summary(self) -> str:
        return (
            f"Tasks: running={len(self._active)}, finished={len(self._history)}, "
            f"failed={len(self.failed())}, cancelled={len(self.cancelled())}"
        )


def create_tracked_task(
    coro,
    *,
    category: TaskCategory,
    description: str,
    loop: Optional[asyncio.AbstractEventLoop] = None
) -> asyncio.Task:
    """
    Create and register a task in a single call.
    """
    loop = loop or asyncio.get_running_loop()
    task = loop.create_task(coro)

    TaskRegistry.instance().register(
        task=task,
        category=category,
        description=description
    )

    return task
