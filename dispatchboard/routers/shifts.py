from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Shift
from ..schemas.shift import ShiftCreate, ShiftRead, ShiftUpdate
from ..services import shifts as shift_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shifts", tags=["shifts"])


def _get_shift(db: Session, shift_id: int) -> Shift:
    shift = db.query(Shift).filter(Shift.id == shift_id).one_or_none()
    if not shift:
        raise HTTPException(status_code=404, detail="Shift not found")
    return shift


@router.get("", response_model=list[ShiftRead])
async def list_shifts(db: Session = Depends(get_db)):
    return db.query(Shift).order_by(Shift.start_time.asc(), Shift.id.asc()).all()


@router.post("", response_model=ShiftRead, status_code=201)
async def create_shift(payload: ShiftCreate, db: Session = Depends(get_db)):
    shift = Shift(name=payload.name.strip(), requires_supervisor=payload.requires_supervisor)
    shift_service.apply_times(shift, payload.start_time, payload.end_time)
    db.add(shift)
    db.commit()
    logger.info(
        "Created shift %s %s-%s",
        shift.id,
        shift.start_time.strftime("%H:%M"),
        shift.end_time.strftime("%H:%M"),
    )
    return shift


@router.get("/{shift_id}", response_model=ShiftRead)
async def get_shift(shift_id: int, db: Session = Depends(get_db)):
    return _get_shift(db, shift_id)


@router.patch("/{shift_id}", response_model=ShiftRead)
async def update_shift(shift_id: int, payload: ShiftUpdate, db: Session = Depends(get_db)):
    shift = _get_shift(db, shift_id)
    start = payload.start_time or shift.start_time
    end = payload.end_time or shift.end_time
    if start == end:
        raise HTTPException(status_code=422, detail="Shift start and end times must differ")
    if payload.name is not None:
        shift.name = payload.name.strip()
    if payload.requires_supervisor is not None:
        shift.requires_supervisor = payload.requires_supervisor
    shift_service.apply_times(shift, start, end)
    db.commit()
    return shift


@router.delete("/{shift_id}", status_code=204)
async def delete_shift(shift_id: int, db: Session = Depends(get_db)):
    shift = _get_shift(db, shift_id)
    if shift_service.shift_in_use(db, shift.id):
        raise HTTPException(status_code=409, detail="Shift is referenced by assignments")
    db.delete(shift)
    db.commit()
    logger.info("Deleted shift %s", shift_id)
    return Response(status_code=204)
