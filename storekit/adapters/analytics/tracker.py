"""Logging analytics adapter.

Implements AnalyticsPort by writing each page view to the application
log and keeping per-path view counts for the lifetime of the process.
"""

import logging
from collections import Counter

from storekit.core.ports import AnalyticsPort

logger = logging.getLogger(__name__)


class LoggingAnalyticsAdapter(AnalyticsPort):
    """Records page views in the log."""

    def __init__(self) -> None:
        self.view_counts: Counter[str] = Counter()

    async def track_page_view(self, path: str) -> None:
        """Log a page view and bump its counter."""
        self.view_counts[path] += 1
        logger.info(
            f"Page view: {path}",
            extra={"path": path, "views": self.view_counts[path]},
        )
