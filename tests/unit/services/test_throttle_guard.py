from datetime import timedelta
from uuid import uuid4

from src.app.services.throttle_guard import ThrottleGuard
from src.domain.base import utc_now
from src.domain.entities import ConfirmationChallenge


def challenge_created(ago: timedelta) -> ConfirmationChallenge:
    now = utc_now()
    return ConfirmationChallenge(
        account_id=uuid4(),
        code=123456,
        token="A" * 64,
        expires_at=now + timedelta(minutes=10),
        created_at=now - ago,
    )


def test_no_previous_challenge_is_not_throttled():
    assert ThrottleGuard(timedelta(minutes=3)).is_throttled(None) is False


def test_recent_challenge_is_throttled():
    guard = ThrottleGuard(timedelta(minutes=3))
    assert guard.is_throttled(challenge_created(timedelta(minutes=1))) is True


def test_window_boundary_is_inclusive():
    guard = ThrottleGuard(timedelta(minutes=3))
    last = challenge_created(timedelta(0))
    assert guard.is_throttled(last, now=last.created_at + timedelta(minutes=3)) is True


def test_old_challenge_is_not_throttled():
    guard = ThrottleGuard(timedelta(minutes=3))
    assert guard.is_throttled(challenge_created(timedelta(minutes=3, seconds=1))) is False
