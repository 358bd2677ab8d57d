"""Tests for class and student commands."""

from __future__ import annotations

import pytest

from taa.core.exceptions import (
    DuplicateEntityError, InvalidValueError, MissingArgumentError, ResourceNotFoundError
)


class TestClassCommands:
    def test_add_class(self, run, populated_model, ui):
        run("add_class c/C2 m/CS2113", populated_model)
        assert populated_model.classes.get_class("C2").module_code == "CS2113"
        assert ui.last_message.endswith("There are 2 classes in the list.")

    def test_add_class_unknown_module(self, run, populated_model):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            run("add_class c/C2 m/CS9999", populated_model)
        assert exc_info.value.message == "Module not found."
        assert populated_model.classes.size == 1

    def test_add_duplicate_class(self, run, populated_model):
        with pytest.raises(DuplicateEntityError):
            run("add_class c/C1 m/CS2113", populated_model)

    def test_class_id_with_space(self, run, populated_model):
        with pytest.raises(InvalidValueError):
            run("add_class c/Class 1 m/CS2113", populated_model)

    def test_new_class_uses_model_case_policy(self, run, populated_model):
        from taa.core.enums import NameCasePolicy

        populated_model.name_policy = NameCasePolicy.CASE_SENSITIVE
        run("add_class c/C2 m/CS2113", populated_model)
        assessments = populated_model.classes.get_class("C2").assessments
        assert assessments.name_policy is NameCasePolicy.CASE_SENSITIVE

    def test_edit_class(self, run, populated_model):
        run("edit_class c/C1 nc/T01", populated_model)
        assert populated_model.classes.get_class("C1") is None
        assert populated_model.classes.get_class("T01").students.size == 2

    def test_edit_class_to_existing_id(self, run, populated_model):
        run("add_class c/C2 m/CS2113", populated_model)
        with pytest.raises(DuplicateEntityError):
            run("edit_class c/C1 nc/C2", populated_model)

    def test_delete_class(self, run, populated_model, ui):
        run("delete_class c/C1", populated_model)
        assert populated_model.classes.size == 0
        assert "There are 0 classes in the list." in ui.last_message

    def test_list_classes(self, run, populated_model, ui):
        run("list_classes", populated_model)
        assert ui.last_message == (
            "List of classes:\n"
            "  1. C1 (Module: CS2113, Students: 2, Assessments: 2, Total Weightage: 70.00%)"
        )

    def test_list_no_classes(self, run, model, ui):
        run("list_classes", model)
        assert ui.last_message == "There are no classes in the list."


class TestStudentCommands:
    def test_add_student(self, run, populated_model, ui):
        run("add_student c/C1 i/A003 n/Chen Wei Ling", populated_model)
        student = populated_model.classes.get_class("C1").students.get_student("A003")
        assert student.name == "Chen Wei Ling"
        assert ui.last_message == (
            "Student added to C1:\n  A003 - Chen Wei Ling\nThere are 3 students in the class."
        )

    def test_add_duplicate_student(self, run, populated_model):
        with pytest.raises(DuplicateEntityError):
            run("add_student c/C1 i/A001 n/Someone Else", populated_model)

    def test_edit_student_name_only(self, run, populated_model):
        run("edit_student c/C1 i/A001 n/Alice Ng", populated_model)
        student = populated_model.classes.get_class("C1").students.get_student("A001")
        assert student.name == "Alice Ng"

    def test_edit_student_id_keeps_marks(self, run, populated_model):
        students = populated_model.classes.get_class("C1").students
        students.get_student("A001").set_mark("Midterm", 40.0)
        run("edit_student c/C1 i/A001 ni/A010", populated_model)
        assert students.get_student("A001") is None
        assert students.get_student("A010").get_mark("Midterm") == 40.0

    def test_edit_student_to_taken_id(self, run, populated_model):
        student = populated_model.classes.get_class("C1").students.get_student("A001")
        with pytest.raises(DuplicateEntityError):
            run("edit_student c/C1 i/A001 ni/A002 n/Changed", populated_model)
        assert student.name == "Alice Tan"

    def test_edit_student_needs_a_new_value(self, run, populated_model):
        with pytest.raises(MissingArgumentError):
            run("edit_student c/C1 i/A001", populated_model)

    def test_delete_student(self, run, populated_model):
        run("delete_student c/C1 i/A002", populated_model)
        assert populated_model.classes.get_class("C1").students.size == 1

    def test_delete_unknown_student(self, run, populated_model):
        with pytest.raises(ResourceNotFoundError):
            run("delete_student c/C1 i/A999", populated_model)

    def test_list_students(self, run, populated_model, ui):
        run("list_students c/C1", populated_model)
        assert ui.last_message == "Students in C1:\n  1. A001 - Alice Tan\n  2. A002 - Bob Lim"

    def test_find_student(self, run, populated_model, ui):
        run("find_student c/C1 k/bob", populated_model)
        assert ui.last_message == "Students in C1 matching 'bob':\n  1. A002 - Bob Lim"

    def test_find_student_without_match(self, run, populated_model, ui):
        run("find_student c/C1 k/zed", populated_model)
        assert ui.last_message == "There are no students in C1 matching 'zed'."
