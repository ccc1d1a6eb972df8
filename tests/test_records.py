import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.records import Employee, MarksTracker, StudentRecord


def test_student_describe_source_example():
    record = StudentRecord("2023BMEC150", "Imaginary Singh", 9.64)
    assert record.describe() == (
        "Imaginary Singh having enrollment number 2023BMEC150 got 9.64 cgpa in 5th sem."
    )


def test_student_describe_pads_to_two_decimals():
    record = StudentRecord("2023BMEC058", "Test Student", 8.1)
    assert record.describe().endswith("got 8.10 cgpa in 5th sem.")


def test_student_record_is_immutable():
    record = StudentRecord("2023BMEC058", "Test Student", 8.1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.cgpa = 9.0
    assert record.cgpa == 8.1
    assert record.describe().endswith("got 8.10 cgpa in 5th sem.")


def test_employee_describe_three_decimals():
    employee = Employee("Test Employee", 70000.50)
    assert employee.describe() == "Test Employee have 70000.500 salary per month."


def test_employee_describe_keeps_name():
    employee = Employee("A B", 1.0)
    assert employee.describe().startswith("A B have ")


def test_empty_tracker_average_raises():
    with pytest.raises(ValueError):
        MarksTracker().average()


def test_add_and_extend_grow_tracker():
    tracker = MarksTracker([40, 55])
    tracker.add(62)
    tracker.extend([77, 90])
    assert len(tracker) == 5


def test_late_students_change_average():
    tracker = MarksTracker([50, 50, 50])
    assert tracker.average() == 50
    tracker.extend([50, 50])
    assert tracker.average() == 50
    tracker.add(100)
    assert tracker.average() > 50


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=1, max_value=20))
def test_uniform_marks_average_to_that_mark(mark, count):
    assert MarksTracker([mark] * count).average() == mark


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=50))
def test_average_lies_between_min_and_max(marks):
    average = MarksTracker(marks).average()
    assert min(marks) <= average <= max(marks)


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=20))
def test_average_does_not_depend_on_order(marks):
    forward = MarksTracker(marks).average()
    backward = MarksTracker(reversed(marks)).average()
    assert forward == pytest.approx(backward)


@given(
    st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=10),
    st.lists(st.integers(min_value=0, max_value=100), max_size=10),
)
def test_extend_equals_building_at_once(first, late):
    tracker = MarksTracker(first)
    tracker.extend(late)
    combined = MarksTracker(first + late)
    assert len(tracker) == len(combined)
    assert tracker.average() == pytest.approx(combined.average())