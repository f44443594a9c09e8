from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Employee, TimeOffRequest
from ..schemas.time_off import TimeOffCreate, TimeOffDecision, TimeOffRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/time-off", tags=["time-off"])


def _get_request(db: Session, request_id: int) -> TimeOffRequest:
    request = db.query(TimeOffRequest).filter(TimeOffRequest.id == request_id).one_or_none()
    if not request:
        raise HTTPException(status_code=404, detail="Time-off request not found")
    return request


@router.get("", response_model=list[TimeOffRead])
async def list_time_off(
    employee_id: int | None = None,
    status: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    db: Session = Depends(get_db),
):
    query = db.query(TimeOffRequest)
    if employee_id is not None:
        query = query.filter(TimeOffRequest.employee_id == employee_id)
    if status:
        query = query.filter(TimeOffRequest.status == status)
    # overlap with the requested window
    if start_date:
        query = query.filter(TimeOffRequest.end_date >= start_date)
    if end_date:
        query = query.filter(TimeOffRequest.start_date <= end_date)
    return query.order_by(TimeOffRequest.start_date.asc(), TimeOffRequest.id.asc()).all()


@router.post("", response_model=TimeOffRead, status_code=201)
async def create_time_off(payload: TimeOffCreate, db: Session = Depends(get_db)):
    employee = db.query(Employee).filter(Employee.id == payload.employee_id).one_or_none()
    if not employee or not employee.is_active:
        raise HTTPException(status_code=404, detail="Employee not found")
    request = TimeOffRequest(
        employee_id=employee.id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        request_type=payload.request_type,
        status="pending",
        reason=payload.reason,
    )
    db.add(request)
    db.commit()
    logger.info(
        "Employee %s requested %s time off %s to %s",
        employee.id,
        request.request_type,
        request.start_date,
        request.end_date,
    )
    return request


@router.get("/{request_id}", response_model=TimeOffRead)
async def get_time_off(request_id: int, db: Session = Depends(get_db)):
    return _get_request(db, request_id)


@router.patch("/{request_id}", response_model=TimeOffRead)
async def decide_time_off(request_id: int, payload: TimeOffDecision, db: Session = Depends(get_db)):
    request = _get_request(db, request_id)
    if request.status != "pending":
        raise HTTPException(status_code=409, detail=f"Request is already {request.status}")
    approver = db.query(Employee).filter(Employee.id == payload.approved_by).one_or_none()
    if not approver or not approver.is_active:
        raise HTTPException(status_code=404, detail="Approver not found")
    if not approver.is_supervisor:
        raise HTTPException(status_code=403, detail="Only supervisors and management can decide requests")
    if approver.id == request.employee_id:
        raise HTTPException(status_code=403, detail="Employees cannot decide their own requests")
    request.status = payload.status
    request.approved_by = approver.id
    db.commit()
    logger.info("Time-off request %s %s by employee %s", request.id, request.status, approver.id)
    return request


@router.delete("/{request_id}", status_code=204)
async def withdraw_time_off(request_id: int, db: Session = Depends(get_db)):
    request = _get_request(db, request_id)
    if request.status != "pending":
        raise HTTPException(status_code=409, detail="Only pending requests can be withdrawn")
    db.delete(request)
    db.commit()
    logger.info("Withdrew time-off request %s", request_id)
    return Response(status_code=204)
