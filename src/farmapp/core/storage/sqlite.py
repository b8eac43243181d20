"""
SQLite action-plan repository.

Persistent local storage featuring:
- Schema versioning and migrations
- One connection per operation via a context manager
- JSON columns for the list fields
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from ..types import ActionPlan, ActionPlanStatus, Priority, ValidationStatus
from .base import ActionPlanRepository
from .seed import default_action_plans

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class SQLiteActionPlanRepository(ActionPlanRepository):
    """
    Action plans in a local SQLite file.

    A fresh database is seeded with the default plans unless ``seed`` is
    False or explicit ``plans`` are given.
    """

    def __init__(
        self,
        db_path: Path,
        seed: bool = True,
        plans: Optional[Iterable[ActionPlan]] = None,
    ):
        self.db_path = Path(db_path)
        self._init_db()
        if plans is not None:
            self.save_batch(list(plans))
        elif seed and self.count() == 0:
            self.save_batch(default_action_plans())

    @contextmanager
    def _connection(self):
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema with versioning."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with self._connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY,
                    applied_at TEXT NOT NULL,
                    description TEXT
                )
            """)

            current_version = self._get_schema_version_internal(conn)
            if current_version < SCHEMA_VERSION:
                self._migrate(conn, current_version)

    def _get_schema_version_internal(self, conn: sqlite3.Connection) -> int:
        row = conn.execute(
            "SELECT MAX(version) as v FROM schema_version"
        ).fetchone()
        return row["v"] if row and row["v"] else 0

    def _migrate(self, conn: sqlite3.Connection, from_version: int) -> None:
        """Run schema migrations."""
        if from_version < 1:
            logger.debug("Creating action plan schema in %s", self.db_path)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS action_plans (
                    id TEXT PRIMARY KEY,
                    indicator_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    steps TEXT,
                    products TEXT,
                    deadline TEXT,
                    priority TEXT NOT NULL,
                    status TEXT NOT NULL,
                    validation_status TEXT,
                    validation_feedback TEXT,
                    execution_photo TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_plans_indicator ON action_plans(indicator_id)"
            )
            conn.execute("""
                INSERT INTO schema_version (version, applied_at, description)
                VALUES (1, ?, 'Initial schema')
            """, (datetime.now(timezone.utc).isoformat(),))

    def get_schema_version(self) -> int:
        with self._connection() as conn:
            return self._get_schema_version_internal(conn)

    def get(self, plan_id: str) -> Optional[ActionPlan]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM action_plans WHERE id = ?", (plan_id,)
            ).fetchone()
            return self._row_to_plan(row) if row else None

    def list(self, indicator_id: Optional[str] = None) -> List[ActionPlan]:
        with self._connection() as conn:
            if indicator_id is None:
                rows = conn.execute("SELECT * FROM action_plans ORDER BY rowid").fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM action_plans WHERE indicator_id = ? ORDER BY rowid",
                    (indicator_id,),
                ).fetchall()
            return [self._row_to_plan(row) for row in rows]

    def count(self) -> int:
        with self._connection() as conn:
            return conn.execute("SELECT COUNT(*) as c FROM action_plans").fetchone()["c"]

    def _save(self, plan: ActionPlan) -> None:
        with self._connection() as conn:
            conn.execute(self._UPSERT, self._plan_to_row(plan))

    def save_batch(self, plans: List[ActionPlan]) -> int:
        """Persist multiple plans in a single transaction."""
        if not plans:
            return 0
        with self._connection() as conn:
            conn.executemany(self._UPSERT, [self._plan_to_row(p) for p in plans])
        return len(plans)

    def clear(self) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM action_plans")

    _UPSERT = """
        INSERT INTO action_plans
        (id, indicator_id, title, description, steps, products, deadline, priority,
         status, validation_status, validation_feedback, execution_photo,
         created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET
            indicator_id = excluded.indicator_id,
            title = excluded.title,
            description = excluded.description,
            steps = excluded.steps,
            products = excluded.products,
            deadline = excluded.deadline,
            priority = excluded.priority,
            status = excluded.status,
            validation_status = excluded.validation_status,
            validation_feedback = excluded.validation_feedback,
            execution_photo = excluded.execution_photo,
            updated_at = excluded.updated_at
    """

    @staticmethod
    def _plan_to_row(plan: ActionPlan) -> tuple:
        return (
            plan.id, plan.indicator_id, plan.title, plan.description,
            json.dumps(plan.steps, ensure_ascii=False),
            json.dumps(plan.products, ensure_ascii=False),
            plan.deadline, plan.priority.value, plan.status.value,
            plan.validation_status.value if plan.validation_status else None,
            plan.validation_feedback, plan.execution_photo,
            plan.created_at.isoformat(), plan.updated_at.isoformat(),
        )

    @staticmethod
    def _row_to_plan(row: sqlite3.Row) -> ActionPlan:
        return ActionPlan(
            id=row["id"],
            indicator_id=row["indicator_id"],
            title=row["title"],
            description=row["description"],
            steps=json.loads(row["steps"]) if row["steps"] else [],
            products=json.loads(row["products"]) if row["products"] else [],
            deadline=row["deadline"] or "",
            priority=Priority(row["priority"]),
            status=ActionPlanStatus(row["status"]),
            validation_status=ValidationStatus(row["validation_status"]) if row["validation_status"] else None,
            validation_feedback=row["validation_feedback"],
            execution_photo=row["execution_photo"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
