from datetime import datetime, timedelta
from typing import Optional

from src.domain.base import utc_now
from src.domain.entities import ConfirmationChallenge


class ThrottleGuard:
    """Refuses a new confirmation while the previous one is younger than the window"""

    def __init__(self, window: timedelta):
        self.window = window

    def is_throttled(
        self, last_challenge: Optional[ConfirmationChallenge], now: Optional[datetime] = None
    ) -> bool:
        if last_challenge is None or last_challenge.created_at is None:
            return False

        now = now or utc_now()
        return now - last_challenge.created_at <= self.window
