import logging
import time
from typing import Any, Optional

import click

from ..config import Settings
from ..core.telemetry import AnalyticsService

logger = logging.getLogger(__name__)


def build_analytics(settings: Settings) -> AnalyticsService:
    """
    Create the analytics service for one CLI run.

    Disabled analytics still yields a service; events just stay queued.
    """
    service = AnalyticsService()
    if settings.analytics.enabled:
        try:
            service.initialize(settings.analytics.provider, settings.analytics.key)
        except ValueError as e:
            logger.warning("Analytics disabled: %s", e)
    return service


class AnalyticsGroup(click.Group):
    """
    A Click Group that reports every command run to analytics.

    The service is read from ``ctx.obj.analytics`` after the group callback
    has set it up. Duration, exit code and error type are recorded even when
    the command fails.
    """

    def invoke(self, ctx: click.Context) -> Any:
        start_time = time.perf_counter()
        exit_code = 0
        error_type: Optional[str] = None

        try:
            return super().invoke(ctx)
        except SystemExit as e:
            exit_code = e.code if isinstance(e.code, int) else 1
            if exit_code != 0:
                error_type = "SystemExit"
            raise
        except Exception as e:
            exit_code = 1
            error_type = type(e).__name__
            raise
        finally:
            analytics = getattr(ctx.obj, "analytics", None)
            if analytics is not None:
                duration_ms = (time.perf_counter() - start_time) * 1000
                analytics.track_event(
                    "command_run",
                    {
                        "command": ctx.invoked_subcommand or "unknown",
                        "duration_ms": round(duration_ms, 2),
                        "success": exit_code == 0,
                        "exit_code": exit_code,
                        "error_type": error_type,
                    },
                )
