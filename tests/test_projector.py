import pytest

from core.exceptions import InvalidValuesError
from core.models import UNREACHABLE, ErrorKind, PlanStatus, ProjectionInput, ValidationFailure
from core.projector import (
    analyse,
    best_case_percent,
    minimum_additional_classes,
    project,
    worst_case_percent,
)
from core.what_if import final_percent


def scan(attended, conducted, remaining, target):
    for i in range(remaining + 1):
        if (attended + i) / (conducted + remaining) * 100 >= target:
            return i
    return UNREACHABLE


def test_mid_term_projection():
    result = analyse({"attended": 18, "conducted": 20, "remaining": 10, "target": 75})

    view = result.display()
    assert view["current"] == 90.0
    assert view["best_case"] == 93.33
    assert view["worst_case"] == 60.0
    assert result.minimum_additional_classes == 5
    assert result.bunk_budget == 5
    assert result.what_if is None
    assert "final" not in view


def test_minimum_found_is_minimal():
    result = analyse({"attended": 18, "conducted": 20, "remaining": 10, "target": 75})
    needed = result.minimum_additional_classes

    assert (18 + needed) / 30 * 100 >= 75
    assert (18 + needed - 1) / 30 * 100 < 75


def test_unreachable_target():
    result = analyse({"attended": 2, "conducted": 20, "remaining": 5, "target": 90})

    assert result.display()["best_case"] == 28.0
    assert result.minimum_additional_classes == UNREACHABLE
    assert not result.is_reachable
    assert result.bunk_budget is None


def test_what_if_safe_plan():
    result = analyse({"attended": 18, "conducted": 20, "remaining": 10, "target": 70, "planned": 8})

    assert result.display()["final"] == 86.67
    assert result.what_if.status is PlanStatus.SAFE
    assert result.what_if.message == "With your plan to attend 8 more classes, you will meet the target."


def test_what_if_falling_short():
    result = analyse({"attended": 10, "conducted": 20, "remaining": 10, "target": 75, "planned": 5})

    assert result.what_if.status is PlanStatus.DANGER
    assert result.what_if.message == (
        "With this plan, you will fall short of the target. Increase planned attendance."
    )


def test_attended_above_conducted_rejected():
    result = analyse({"attended": 21, "conducted": 20, "remaining": 5, "target": 75})

    assert isinstance(result, ValidationFailure)
    assert result.kind is ErrorKind.INVALID_VALUES
    assert result.message == "Invalid attendance values."


def test_full_attendance_with_nothing_remaining():
    result = project(ProjectionInput(attended=12, conducted=12, remaining=0, target=75))

    assert result.best_case_percentage == result.worst_case_percentage == result.current_percentage == 100
    assert result.minimum_additional_classes == 0


def test_result_keeps_its_input():
    data = ProjectionInput(attended=5, conducted=8, remaining=4, target=60, planned=2)
    assert project(data).source == data


def test_project_rejects_unvalidated_input():
    with pytest.raises(InvalidValuesError):
        project(ProjectionInput(attended=0, conducted=0, remaining=5, target=75))

    with pytest.raises(InvalidValuesError):
        project(ProjectionInput(attended=3, conducted=5, remaining=2, target=75, planned=3))


@pytest.mark.parametrize("attended,conducted,remaining,target,expected", [
    # exactly on target counts as reaching it
    (3, 4, 0, 75, 0),
    (0, 2, 2, 50, 2),
    (15, 20, 0, 75, 0),
    (15, 20, 0, 75.01, UNREACHABLE),
    # negative and over-100 targets are taken as given
    (0, 5, 5, -10, 0),
    (10, 10, 0, 100, 0),
    (10, 10, 5, 100.5, UNREACHABLE),
])
def test_minimum_additional_classes_edges(attended, conducted, remaining, target, expected):
    assert minimum_additional_classes(attended, conducted, remaining, target) == expected


@pytest.mark.parametrize("target,expected", [
    ("1e308", UNREACHABLE),
    ("-1e308", 0),
])
def test_extreme_targets_do_not_overflow(target, expected):
    result = analyse({"attended": 18, "conducted": 20, "remaining": 10, "target": target})

    assert result.minimum_additional_classes == expected


def test_huge_counts_with_huge_target():
    assert minimum_additional_classes(10, 10 ** 300, 10 ** 300, 1e300) == UNREACHABLE
    assert minimum_additional_classes(10, 10 ** 300, 10 ** 300, -1e300) == 0


@pytest.mark.parametrize("target", [float("nan"), float("inf"), 10 ** 400])
def test_project_rejects_non_finite_target(target):
    with pytest.raises(InvalidValuesError):
        project(ProjectionInput(attended=18, conducted=20, remaining=10, target=target))


def test_closed_form_matches_scan():
    targets = [-5, 0, 10, 33.3, 50, 60, 66.67, 70, 75, 80, 85.5, 90, 99.9, 100, 101]

    for conducted in range(1, 9):
        for attended in range(conducted + 1):
            for remaining in range(7):
                for target in targets:
                    assert minimum_additional_classes(attended, conducted, remaining, target) == \
                        scan(attended, conducted, remaining, target), (attended, conducted, remaining, target)


def test_bounds_spread_equals_remaining_share():
    for conducted in range(1, 12):
        for attended in range(conducted + 1):
            for remaining in range(10):
                best = best_case_percent(attended, conducted, remaining)
                worst = worst_case_percent(attended, conducted, remaining)

                assert worst <= best
                assert best - worst == pytest.approx(remaining / (conducted + remaining) * 100)


def test_final_percent_never_drops_as_plan_grows():
    attended, conducted, remaining = 7, 15, 12
    finals = [final_percent(attended, conducted, remaining, p) for p in range(remaining + 1)]

    assert finals == sorted(finals)
    assert finals[0] == worst_case_percent(attended, conducted, remaining)
    assert finals[-1] == best_case_percent(attended, conducted, remaining)


def test_status_uses_unrounded_percentage():
    # 3752 / 5003 displays as 75.00 but sits just below 75
    result = analyse({"attended": 3752, "conducted": 5003, "remaining": 0, "target": 75, "planned": 0})

    assert result.display()["final"] == 75.0
    assert result.what_if.status is PlanStatus.DANGER
    assert result.minimum_additional_classes == UNREACHABLE


def test_missing_planned_rejected_when_required():
    result = analyse({"attended": 18, "conducted": 20, "remaining": 10, "target": 75}, require_planned=True)

    assert isinstance(result, ValidationFailure)
    assert result.kind is ErrorKind.MISSING_FIELD
