from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .assignment import ScheduleAssignment  # noqa: E402,F401
from .availability import EmployeeAvailability  # noqa: E402,F401
from .employee import Employee  # noqa: E402,F401
from .requirement import TimeBasedRequirement  # noqa: E402,F401
from .schedule import Schedule  # noqa: E402,F401
from .shift import Shift  # noqa: E402,F401
from .time_off import TimeOffRequest  # noqa: E402,F401
