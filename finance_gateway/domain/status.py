"""Budget status and goal progress classification"""

from typing import Any

from finance_gateway.domain.exceptions import InvalidAmountError, InvalidTargetError
from finance_gateway.domain.models import BudgetStatus, GoalProgress, StatusResult
from finance_gateway.utils.numbers import clamp, is_finite_number, round_half_up

WARNING_THRESHOLD = 85.0
EXCEEDED_THRESHOLD = 100.0


def _raw_percentage(target: Any, current: Any) -> float:
    if not is_finite_number(target) or target <= 0:
        raise InvalidTargetError(f"Target must be a positive finite number, got {target!r}")
    if not is_finite_number(current):
        raise InvalidAmountError(f"Current amount must be a finite number, got {current!r}")

    return float(current) / float(target) * 100


def _display_percentage(raw: float) -> int:
    return round_half_up(clamp(raw, 0.0, 100.0))


def classify_budget(target: float, current: float) -> StatusResult:
    """
    Classify a budget's spend against its cap.

    Thresholds are checked on the unclamped ratio so a budget at 150% still
    reads as exceeded:
    - >= 100%:  exceeded
    - 85-100%:  warning
    - < 85%:    on track

    The returned percentage is clamped to 0-100 and rounded for display.

    Raises:
        InvalidTargetError: target is not a positive finite number
        InvalidAmountError: current is not a finite number
    """
    raw = _raw_percentage(target, current)

    if raw >= EXCEEDED_THRESHOLD:
        status = BudgetStatus.EXCEEDED
    elif raw >= WARNING_THRESHOLD:
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.ON_TRACK

    return StatusResult(percentage=_display_percentage(raw), status=status)


def classify_goal(target: float, current: float) -> GoalProgress:
    """Goal completion percentage, clamped to 0-100. Goals have no failure state."""
    return GoalProgress(percentage=_display_percentage(_raw_percentage(target, current)))
