import logging

from fastapi import FastAPI

from .config import get_settings
from .migration_runner import run_migrations_once
from .routers import availability, employees, requirements, schedules, shifts, staffing, time_off

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)


@app.get("/health")
async def health():
    return {"status": "ok", "environment": settings.environment}


@app.on_event("startup")
async def ensure_schema() -> None:
    if not settings.auto_migrate:
        logger.info("AUTO_MIGRATE disabled; skipping migrations")
        return
    try:
        run_migrations_once()
    except Exception:  # pragma: no cover - startup failures should surface
        logger.exception("Database migration failed")
        raise


app.include_router(employees.router)
app.include_router(availability.router)
app.include_router(time_off.router)
app.include_router(shifts.router)
app.include_router(schedules.router)
app.include_router(requirements.router)
app.include_router(staffing.router)
