DAY_NAMES = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

EMPLOYEE_POSITIONS = ("dispatcher", "shift_supervisor", "management")
SUPERVISOR_POSITIONS = frozenset({"shift_supervisor", "management"})

SCHEDULE_STATUSES = ("draft", "published", "archived")

TIME_OFF_TYPES = ("vacation", "sick", "personal", "other")
TIME_OFF_STATUSES = ("pending", "approved", "denied")
