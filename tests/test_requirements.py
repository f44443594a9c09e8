import random
from datetime import date, time

import pytest

from dispatchboard.services.requirements import (
    Assignment,
    InvalidRequirementInput,
    TimeBasedRequirement,
    day_of_week_for,
    evaluate,
    evaluate_range,
    parse_time_of_day,
    resolve_day_of_week,
    summarize,
    window_contains,
    window_seconds,
)

MONDAY = date(2025, 1, 13)
TUESDAY = date(2025, 1, 14)
WEDNESDAY = date(2025, 1, 15)


def _assignment(start, employee_id=1, on=MONDAY, supervisor=False):
    return Assignment(
        employee_id=employee_id,
        shift_id=1,
        date=on,
        start_time=start,
        is_supervisor=supervisor,
    )


def _requirement(start, end, minimum, day=1, **kw):
    return TimeBasedRequirement(
        schedule_id=1,
        day_of_week=day,
        start_time=start,
        end_time=end,
        min_employees=minimum,
        **kw,
    )


def test_day_of_week_counts_sunday_as_zero():
    assert day_of_week_for(date(2025, 1, 12)) == 0
    assert day_of_week_for(MONDAY) == 1
    assert day_of_week_for("2025-01-18") == 6


def test_resolve_day_of_week_accepts_names_and_numbers():
    assert resolve_day_of_week("Monday") == 1
    assert resolve_day_of_week("sun") == 0
    assert resolve_day_of_week("3") == 3
    assert resolve_day_of_week(6) == 6
    with pytest.raises(InvalidRequirementInput):
        resolve_day_of_week(7)
    with pytest.raises(InvalidRequirementInput):
        resolve_day_of_week("someday")


def test_parse_time_of_day_formats():
    assert parse_time_of_day("09:00") == 9 * 3600
    assert parse_time_of_day("21:30:00") == 21 * 3600 + 30 * 60
    assert parse_time_of_day("09:00:30") == 9 * 3600 + 30
    assert parse_time_of_day(time(1, 15, 5)) == 3600 + 15 * 60 + 5
    with pytest.raises(InvalidRequirementInput):
        parse_time_of_day("25:00")
    with pytest.raises(InvalidRequirementInput):
        parse_time_of_day("nine")


def test_window_contains_is_half_open():
    nine, five_pm = 9 * 3600, 17 * 3600
    assert window_contains(nine, five_pm, nine)
    assert not window_contains(nine, five_pm, five_pm)
    assert not window_contains(nine + 30, five_pm, nine + 10)
    # 21:00-01:00
    nine_pm, one_am = 21 * 3600, 3600
    assert window_contains(nine_pm, one_am, 23 * 3600 + 30 * 60)
    assert window_contains(nine_pm, one_am, 30 * 60)
    assert not window_contains(nine_pm, one_am, one_am)
    assert not window_contains(nine_pm, one_am, 20 * 3600)


def test_window_seconds_wraps_midnight():
    assert window_seconds("09:00", "17:00") == 8 * 3600
    assert window_seconds("21:00", "01:00") == 4 * 3600
    assert window_seconds("09:00:00", "09:00:30") == 30
    with pytest.raises(InvalidRequirementInput):
        window_seconds("08:00", "08:00")


def test_window_start_is_exact_to_the_second():
    statuses = evaluate(
        MONDAY,
        [_assignment("09:00:10", 1), _assignment("09:00:30", 2)],
        [_requirement("09:00:30", "17:00:00", 1)],
    )
    assert statuses[0].actual == 1
    assert statuses[0].time_block.start == "09:00:30"
    assert statuses[0].time_block.end == "17:00"


def test_sub_minute_window_is_not_empty():
    statuses = evaluate(
        MONDAY,
        [_assignment("09:00:00", 1), _assignment("09:00:30", 2)],
        [_requirement("09:00:00", "09:00:30", 1)],
    )
    assert statuses[0].actual == 1
    assert statuses[0].time_block.start == "09:00"
    assert statuses[0].time_block.end == "09:00:30"


def test_full_window_is_satisfied():
    statuses = evaluate(
        MONDAY,
        [_assignment("09:00", 1), _assignment("14:00", 2)],
        [_requirement("09:00", "17:00", 2)],
    )
    assert len(statuses) == 1
    status = statuses[0]
    assert status.required == 2
    assert status.actual == 2
    assert status.satisfied is True
    assert status.date == "2025-01-13"
    assert (status.time_block.start, status.time_block.end) == ("09:00", "17:00")


def test_assignment_before_window_is_not_counted():
    statuses = evaluate(MONDAY, [_assignment("08:00")], [_requirement("09:00", "17:00", 2)])
    assert statuses[0].actual == 0
    assert statuses[0].satisfied is False


def test_cross_midnight_window_counts_late_start():
    statuses = evaluate(MONDAY, [_assignment("23:30")], [_requirement("21:00", "01:00", 1)])
    assert statuses[0].actual == 1
    assert statuses[0].satisfied is True


def test_cross_midnight_window_counts_early_morning_start():
    statuses = evaluate(
        MONDAY,
        [_assignment("00:30", 1), _assignment("01:00", 2), _assignment("20:59", 3)],
        [_requirement("21:00", "01:00", 1)],
    )
    assert statuses[0].actual == 1


def test_empty_requirements_give_empty_result():
    assert evaluate(MONDAY, [_assignment("09:00")], []) == []


def test_other_weekday_requirement_is_skipped():
    tuesday_rule = _requirement("09:00", "17:00", 1, day=2)
    assert evaluate(WEDNESDAY, [_assignment("10:00", on=WEDNESDAY)], [tuesday_rule]) == []
    assert len(evaluate(TUESDAY, [], [tuesday_rule])) == 1


def test_overlapping_requirements_are_counted_independently():
    statuses = evaluate(
        MONDAY,
        [_assignment("12:30")],
        [_requirement("09:00", "17:00", 1), _requirement("12:00", "13:00", 1)],
    )
    assert [s.actual for s in statuses] == [1, 1]
    assert [s.time_block.start for s in statuses] == ["09:00", "12:00"]


def test_no_assignments_reports_zero_actual():
    statuses = evaluate(MONDAY, [], [_requirement("09:00", "17:00", 3), _requirement("17:00", "21:00", 0)])
    assert [s.actual for s in statuses] == [0, 0]
    assert [s.satisfied for s in statuses] == [False, True]


def test_zero_minimum_is_always_satisfied():
    rule = _requirement("09:00", "17:00", 0)
    for assignments in ([], [_assignment("10:00")], [_assignment("18:00")]):
        assert evaluate(MONDAY, assignments, [rule])[0].satisfied is True


def test_supervisor_minimum_requires_separate_count():
    rule = _requirement("09:00", "17:00", 2, min_supervisors=1)
    staff_only = evaluate(MONDAY, [_assignment("09:00", 1), _assignment("10:00", 2)], [rule])[0]
    assert staff_only.actual == 2
    assert staff_only.actual_supervisors == 0
    assert staff_only.satisfied is False

    with_supervisor = evaluate(
        MONDAY,
        [_assignment("09:00", 1), _assignment("10:00", 2, supervisor=True)],
        [rule],
    )[0]
    assert with_supervisor.actual_supervisors == 1
    assert with_supervisor.satisfied is True


def test_supervisor_flag_implies_one_supervisor():
    rule = _requirement("09:00", "17:00", 1, requires_supervisor=True)
    status = evaluate(MONDAY, [_assignment("09:00")], [rule])[0]
    assert status.required_supervisors == 1
    assert status.satisfied is False


def test_named_weekday_requirement_matches():
    statuses = evaluate("2025-01-13", [_assignment("09:00")], [_requirement("09:00", "17:00", 1, day="monday")])
    assert statuses[0].satisfied is True


def test_actual_never_exceeds_assignment_count():
    rng = random.Random(7)
    assignments = [_assignment(time(rng.randrange(24), rng.randrange(60)), i) for i in range(25)]
    requirements = [
        _requirement(time(h), time((h + span) % 24), 1)
        for h in range(0, 24, 3)
        for span in (1, 4, 12)
    ]
    for status in evaluate(MONDAY, assignments, requirements):
        assert status.actual <= len(assignments)


def test_evaluate_is_idempotent_and_order_independent():
    assignments = [_assignment(f"{h:02d}:15", h) for h in range(0, 24, 2)]
    requirements = [_requirement("21:00", "01:00", 2), _requirement("06:00", "14:00", 3)]
    first = evaluate(MONDAY, assignments, requirements)
    assert evaluate(MONDAY, assignments, requirements) == first

    shuffled = list(assignments)
    random.Random(3).shuffle(shuffled)
    assert evaluate(MONDAY, shuffled, requirements) == first


def test_empty_requirement_window_fails_fast():
    with pytest.raises(InvalidRequirementInput):
        evaluate(MONDAY, [], [_requirement("09:00", "09:00", 1)])


def test_malformed_assignment_time_fails_fast():
    with pytest.raises(InvalidRequirementInput):
        evaluate(MONDAY, [_assignment("9am")], [_requirement("09:00", "17:00", 1)])


def test_evaluate_range_groups_assignments_by_date():
    requirements = [_requirement("09:00", "17:00", 1, day=day) for day in range(7)]
    assignments = [_assignment("10:00", on=MONDAY), _assignment("11:00", on=WEDNESDAY)]
    statuses = evaluate_range(MONDAY, WEDNESDAY, assignments, requirements)
    assert [s.date for s in statuses] == ["2025-01-13", "2025-01-14", "2025-01-15"]
    assert [s.actual for s in statuses] == [1, 0, 1]

    reversed_bounds = evaluate_range(WEDNESDAY, MONDAY, assignments, requirements)
    assert reversed_bounds == statuses


def test_summarize_totals_shortfall():
    statuses = evaluate(
        MONDAY,
        [_assignment("09:00")],
        [_requirement("09:00", "17:00", 3), _requirement("09:00", "10:00", 1)],
    )
    assert summarize(statuses) == {"total": 2, "satisfied": 1, "unsatisfied": 1, "shortfall": 2}
