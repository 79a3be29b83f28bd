import pytest
from pydantic import ValidationError

from app.core.validation import error_messages
from app.schemas.student import StudentCreate, StudentUpdate

VALID = {"name": "Ani Lestari", "class_label": "XII IPA 1", "age": 17}


def invalid_fields(model, payload):
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(payload)
    return set(error_messages(exc_info.value.errors()))


class TestStudentCreate:
    def test_accepts_valid_payload(self):
        student = StudentCreate.model_validate(VALID)
        assert student.model_dump() == VALID

    @pytest.mark.parametrize("class_label", ["X IPS 1", "XI IPA 2", "XII IPS 10", "IV  IPA 3"])
    def test_accepts_class_labels(self, class_label):
        assert StudentCreate.model_validate({**VALID, "class_label": class_label}).class_label == class_label

    @pytest.mark.parametrize("age", [6, 18, "12"])
    def test_accepts_age_bounds(self, age):
        assert StudentCreate.model_validate({**VALID, "age": age}).age == int(age)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "Ani 2"),
            ("name", "Ani-Lestari"),
            ("name", ""),
            ("name", "A" * 256),
            ("name", 123),
            ("class_label", "XII IPB 1"),
            ("class_label", "XA IPA 1"),
            ("class_label", "XII IPA"),
            ("class_label", "XIII IPA 10"),
            ("age", 5),
            ("age", 19),
            ("age", 17.5),
            ("age", True),
            ("age", "seventeen"),
        ],
    )
    def test_single_violation_reports_only_that_field(self, field, value):
        assert invalid_fields(StudentCreate, {**VALID, field: value}) == {field}

    def test_accepts_longest_values(self):
        student = StudentCreate.model_validate({**VALID, "name": "A" * 255, "class_label": "XIII IPS 1"})
        assert len(student.name) == 255
        assert len(student.class_label) == 10

    @pytest.mark.parametrize(
        "field,value",
        [
            ("class_label", "XII IPA \u0663"),
            ("class_label", "XII\u00a0IPA 1"),
            ("name", "Ani\u00a0Lestari"),
            ("name", "Ani L\u00e9stari"),
        ],
    )
    def test_rejects_non_ascii_digits_and_spaces(self, field, value):
        assert invalid_fields(StudentCreate, {**VALID, field: value}) == {field}

    def test_reports_every_failed_rule_of_a_field(self):
        with pytest.raises(ValidationError) as exc_info:
            StudentCreate.model_validate({**VALID, "name": "A1" * 200})

        reasons = error_messages(exc_info.value.errors())["name"]
        assert len(reasons) == 2
        assert any("pattern" in reason for reason in reasons)
        assert any("255" in reason for reason in reasons)

    def test_all_fields_required(self):
        assert invalid_fields(StudentCreate, {}) == {"name", "class_label", "age"}

    def test_extra_keys_are_dropped(self):
        student = StudentCreate.model_validate({**VALID, "id": 99, "grade": "A"})
        assert student.model_dump() == VALID


class TestStudentUpdate:
    def test_changes_only_contains_supplied_fields(self):
        assert StudentUpdate.model_validate({"age": 16}).changes() == {"age": 16}

    def test_empty_payload_has_no_changes(self):
        assert StudentUpdate.model_validate({}).changes() == {}

    def test_supplied_field_gets_full_rules(self):
        assert invalid_fields(StudentUpdate, {"age": 19, "name": "Budi"}) == {"age"}

    def test_explicit_null_is_rejected(self):
        assert invalid_fields(StudentUpdate, {"name": None}) == {"name"}


class TestErrorMessages:
    def test_groups_reasons_by_field(self):
        errors = [
            {"loc": ("body", "name"), "msg": "too long"},
            {"loc": ("body", "name"), "msg": "bad format"},
            {"loc": ("path", "student_id"), "msg": "not an int"},
        ]
        assert error_messages(errors) == {
            "name": ["too long", "bad format"],
            "student_id": ["not an int"],
        }

    def test_expands_reasons_from_context(self):
        errors = [{"loc": ("name",), "msg": "a; b", "ctx": {"reasons": ["a", "b"]}}]
        assert error_messages(errors) == {"name": ["a", "b"]}

    def test_error_without_field_goes_under_body(self):
        assert error_messages([{"loc": (), "msg": "not an object"}]) == {"body": ["not an object"]}
        assert error_messages([{"loc": ("body",), "msg": "Field required"}]) == {"body": ["Field required"]}
