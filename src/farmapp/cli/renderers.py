"""
JSON output contract for ``--json`` modes.

Every command answers with the same envelope:

    {"status": "success", "meta": {...}, "data": {...}}
    {"status": "error",   "meta": {...}, "error": {"code": ..., "message": ...}}
"""

import contextlib
import io
import json
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

import click
from pydantic import BaseModel

from .. import __version__
from ..core.exceptions import FarmAppError


class JsonRenderer:
    """Collects a command's result and prints it as a single JSON document."""

    def __init__(self, command: str):
        self.command = command

    @contextlib.contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        """Swallow stray stdout so only the envelope reaches the terminal."""
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield buffer

    def _meta(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        self._emit({"status": "success", "meta": self._meta(), "data": data})

    def render_error(self, error: Exception) -> None:
        code = type(error).__name__ if isinstance(error, FarmAppError) else "INTERNAL_ERROR"
        self._emit({
            "status": "error",
            "meta": self._meta(),
            "error": {"code": code, "message": str(error)},
        })

    def _emit(self, payload: Dict[str, Any]) -> None:
        click.echo(json.dumps(payload, indent=2, default=str))
