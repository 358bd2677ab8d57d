"""Tests for mark commands."""

from __future__ import annotations

import pytest

from taa.core.exceptions import InvalidFormatError, InvalidValueError, ResourceNotFoundError


def student(model, student_id):
    return model.classes.get_class("C1").students.get_student(student_id)


class TestSetMark:
    def test_sets_mark(self, run, populated_model, ui):
        run("set_mark c/C1 i/A001 a/Midterm m/42.5", populated_model)
        assert student(populated_model, "A001").get_mark("Midterm") == 42.5
        assert ui.last_message == "Marks for A001 - Alice Tan in Midterm set to 42.50 / 50."

    def test_uses_canonical_assessment_name(self, run, populated_model):
        run("set_mark c/C1 i/A001 a/MIDTERM m/10", populated_model)
        assert student(populated_model, "A001").marks == {"Midterm": 10.0}

    def test_overwrites_previous_mark(self, run, populated_model):
        run("set_mark c/C1 i/A001 a/Midterm m/10", populated_model)
        run("set_mark c/C1 i/A001 a/Midterm m/20", populated_model)
        assert student(populated_model, "A001").get_mark("Midterm") == 20.0

    def test_above_maximum(self, run, populated_model, storage):
        with pytest.raises(InvalidValueError):
            run("set_mark c/C1 i/A001 a/Midterm m/51", populated_model)
        assert student(populated_model, "A001").get_mark("Midterm") is None
        assert storage.save_count == 0

    def test_negative(self, run, populated_model):
        with pytest.raises(InvalidValueError):
            run("set_mark c/C1 i/A001 a/Midterm m/-1", populated_model)

    def test_not_a_number(self, run, populated_model):
        with pytest.raises(InvalidFormatError):
            run("set_mark c/C1 i/A001 a/Midterm m/full", populated_model)

    def test_unknown_student(self, run, populated_model):
        with pytest.raises(ResourceNotFoundError):
            run("set_mark c/C1 i/A999 a/Midterm m/10", populated_model)

    def test_unknown_assessment(self, run, populated_model):
        with pytest.raises(ResourceNotFoundError):
            run("set_mark c/C1 i/A001 a/Quiz m/10", populated_model)


class TestDeleteMark:
    def test_deletes_mark(self, run, populated_model):
        run("set_mark c/C1 i/A001 a/Midterm m/10", populated_model)
        run("delete_mark c/C1 i/A001 a/Midterm", populated_model)
        assert student(populated_model, "A001").get_mark("Midterm") is None

    def test_no_mark_recorded(self, run, populated_model):
        with pytest.raises(ResourceNotFoundError):
            run("delete_mark c/C1 i/A001 a/Midterm", populated_model)


class TestListAndAverageMarks:
    def test_list_marks(self, run, populated_model, ui):
        run("set_mark c/C1 i/A001 a/Midterm m/42", populated_model)
        run("list_marks c/C1 a/Midterm", populated_model)
        assert ui.last_message == (
            "Marks for Midterm in C1:\n  1. A001 - Alice Tan: 42.00\n  2. A002 - Bob Lim: -"
        )

    def test_average_marks(self, run, populated_model, ui):
        run("set_mark c/C1 i/A001 a/Midterm m/42", populated_model)
        run("set_mark c/C1 i/A002 a/Midterm m/37", populated_model)
        run("average_marks c/C1 a/Midterm", populated_model)
        assert ui.last_message == "Average marks for Midterm in C1: 39.50 / 50 (2 of 2 students)"

    def test_average_only_counts_recorded_marks(self, run, populated_model, ui):
        run("set_mark c/C1 i/A001 a/Midterm m/40", populated_model)
        run("average_marks c/C1 a/Midterm", populated_model)
        assert ui.last_message == "Average marks for Midterm in C1: 40.00 / 50 (1 of 2 students)"

    def test_average_without_marks(self, run, populated_model, ui):
        run("average_marks c/C1 a/Final", populated_model)
        assert ui.last_message == "There are no marks recorded for Final in C1."
