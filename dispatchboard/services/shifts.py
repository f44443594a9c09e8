from __future__ import annotations

from datetime import time
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from ..models import Shift, ScheduleAssignment
from .requirements import window_seconds


def describe_window(start_time: time, end_time: time) -> tuple[Decimal, bool]:
    """Return (duration_hours, crosses_midnight) for a clock-time window."""
    seconds = window_seconds(start_time, end_time)
    hours = (Decimal(seconds) / Decimal(3600)).quantize(Decimal("0.01"))
    return hours, end_time <= start_time


def apply_times(shift: Shift, start_time: Optional[time] = None, end_time: Optional[time] = None) -> None:
    if start_time is not None:
        shift.start_time = start_time
    if end_time is not None:
        shift.end_time = end_time
    shift.duration_hours, shift.crosses_midnight = describe_window(shift.start_time, shift.end_time)


def shift_in_use(db: Session, shift_id: int) -> bool:
    return (
        db.query(ScheduleAssignment.id)
        .filter(ScheduleAssignment.shift_id == shift_id)
        .first()
        is not None
    )
