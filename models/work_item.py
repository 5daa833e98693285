"""
WorkItem — what the engine puts into the scheduler as a task payload.

The scheduler treats payloads as opaque. The engine and the workers don't:
they need to know which handler to run, with which params, and how many
times the item has already failed.

Lifecycle:
    PENDING → RUNNING → COMPLETED
                      → RETRIED → PENDING   (handler raised, retries left)
                      → FAILED              (handler raised, retries exhausted)

Everything lives in memory. Once an item leaves the engine (completed or
dead-lettered) the caller holding the WorkItem reference is the only record.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from models.enums import TaskStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WorkItem:
    task_type: str
    priority: Any
    params: dict = field(default_factory=dict)
    max_retries: int = 3
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # ── Status ──────────────────────────────────────────────────
    status: TaskStatus = TaskStatus.PENDING
    retry_count: int = 0

    # ── Results ─────────────────────────────────────────────────
    result: Optional[dict] = None
    error_message: Optional[str] = None

    # ── Timestamps ──────────────────────────────────────────────
    created_at: datetime = field(default_factory=_utcnow)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return (
            f"<WorkItem {self.id} [{self.task_type}] "
            f"priority={self.priority} status={self.status.value}>"
        )
