"""
Abstract base class for position sources.

Every source answers "where is the user now" in world coordinates. Subclasses
differ only in how they come by that answer.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..motion.models import Vector3
from ..platform import Subscription

logger = logging.getLogger(__name__)


class PositionSource(ABC):
    """
    Abstract base class for the three position source variants.

    All subclasses must implement:
    - current_position() -> Vector3, which never raises and reads as the
      zero vector before tracking starts

    Sources that depend on platform events register their subscriptions in
    start_tracking() and release them in stop().
    """

    kind = "abstract"

    def __init__(self):
        self.is_tracking = False
        self._subscriptions: List[Subscription] = []

    @abstractmethod
    def current_position(self) -> Vector3:
        """Best position estimate available right now"""

    def start_tracking(self) -> None:
        """Begin producing positions; subscribe to platform input if needed"""
        self.is_tracking = True
        logger.info(f"{self.kind} source tracking started")

    def tick(self, now_ms: float) -> None:
        """Advance per-frame state; most sources have none"""

    def stop(self) -> None:
        """Release every platform subscription held by this source"""
        while self._subscriptions:
            self._subscriptions.pop().unsubscribe()
        self.is_tracking = False

    def _track_subscription(self, subscription: Subscription) -> None:
        self._subscriptions.append(subscription)
