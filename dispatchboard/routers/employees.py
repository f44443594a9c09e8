from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Employee
from ..schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees", tags=["employees"])


def _get_employee(db: Session, employee_id: int) -> Employee:
    employee = db.query(Employee).filter(Employee.id == employee_id).one_or_none()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.get("", response_model=list[EmployeeRead])
async def list_employees(
    position: str | None = None,
    active: bool | None = None,
    db: Session = Depends(get_db),
):
    query = db.query(Employee)
    if position:
        query = query.filter(Employee.position == position)
    if active is not None:
        query = query.filter(Employee.is_active.is_(active))
    return query.order_by(Employee.last_name.asc(), Employee.first_name.asc()).all()


@router.post("", response_model=EmployeeRead, status_code=201)
async def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    normalized_email = payload.email.lower()
    existing = db.query(Employee.id).filter(Employee.email == normalized_email).first()
    if existing:
        raise HTTPException(status_code=409, detail="An employee with that email already exists")
    employee = Employee(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        email=normalized_email,
        phone=payload.phone,
        position=payload.position,
        is_active=True,
    )
    db.add(employee)
    db.commit()
    logger.info("Created employee %s (%s)", employee.id, employee.position)
    return employee


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return _get_employee(db, employee_id)


@router.patch("/{employee_id}", response_model=EmployeeRead)
async def update_employee(employee_id: int, payload: EmployeeUpdate, db: Session = Depends(get_db)):
    employee = _get_employee(db, employee_id)
    for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(employee, key, value)
    db.commit()
    return employee


@router.delete("/{employee_id}", response_model=EmployeeRead)
async def deactivate_employee(employee_id: int, db: Session = Depends(get_db)):
    employee = _get_employee(db, employee_id)
    employee.is_active = False
    db.commit()
    logger.info("Deactivated employee %s", employee.id)
    return employee
