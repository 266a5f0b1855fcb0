# roi_calculator/services/portfolio.py

import logging
import threading
from collections import deque
from typing import List, Optional

from roi_calculator.config.settings import settings
from roi_calculator.models.schemas import ChartPoint

logger = logging.getLogger("TaskPortfolio")
logger.setLevel(logging.INFO)


class TaskPortfolio:
    """
    In-memory list of chart points accumulated across calculations.
    Process-local and nothing is persisted. Holds at most `max_points`;
    the oldest point is dropped when a new one arrives at capacity.
    """

    def __init__(self, max_points: Optional[int] = None):
        self.max_points = max_points or settings.PORTFOLIO_MAX_POINTS
        self._points = deque(maxlen=self.max_points)
        self._lock = threading.Lock()

    def add(self, point: ChartPoint) -> int:
        with self._lock:
            if len(self._points) == self.max_points:
                logger.debug(f"Portfolio full ({self.max_points}), dropping '{self._points[0].task_name}'")
            self._points.append(point)
            count = len(self._points)
        logger.info(f"Portfolio: added '{point.task_name}' ({count} tasks plotted)")
        return count

    def list(self) -> List[ChartPoint]:
        with self._lock:
            return list(self._points)

    def clear(self):
        with self._lock:
            self._points.clear()
        logger.info("Portfolio cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)


# Singleton instance
_portfolio_instance = None

def get_portfolio() -> TaskPortfolio:
    """Get or create singleton portfolio instance."""
    global _portfolio_instance
    if _portfolio_instance is None:
        _portfolio_instance = TaskPortfolio()
    return _portfolio_instance
