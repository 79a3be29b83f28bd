import re
from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError

# ASCII classes only: a class label's number must be 0-9, not any Unicode digit
NAME_PATTERN = r"^[a-zA-Z \t\n\r\f\v]+$"
CLASS_LABEL_PATTERN = r"^[XIV]+[ \t\n\r\f\v]+(IPA|IPS)[ \t\n\r\f\v]+[0-9]+$"

NAME_MAX_LENGTH = 255
CLASS_LABEL_MAX_LENGTH = 10

MIN_AGE = 6
MAX_AGE = 18


def _reject_bool(value):
    # JSON true/false would otherwise be coerced to 1/0
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer")
    return value


def string_rules(pattern: str, max_length: int) -> AfterValidator:
    """
    Check the pattern and the length limit of a string field together.

    Every failed rule is reported; the reasons travel in the error's
    ``reasons`` context so they end up as separate messages.
    """
    compiled = re.compile(pattern)

    def check(value: str) -> str:
        reasons: List[str] = []
        if not compiled.fullmatch(value):
            reasons.append(f"String should match pattern '{pattern}'")
        if len(value) > max_length:
            reasons.append(f"String should have at most {max_length} characters")
        if reasons:
            raise PydanticCustomError(
                "string_rules",
                "{summary}",
                {"summary": "; ".join(reasons), "reasons": reasons},
            )
        return value

    return AfterValidator(check)


StudentName = Annotated[str, Field(min_length=1), string_rules(NAME_PATTERN, NAME_MAX_LENGTH)]
ClassLabel = Annotated[
    str, Field(min_length=1), string_rules(CLASS_LABEL_PATTERN, CLASS_LABEL_MAX_LENGTH)
]
StudentAge = Annotated[int, BeforeValidator(_reject_bool), Field(ge=MIN_AGE, le=MAX_AGE)]


class StudentBase(BaseModel):
    name: str
    class_label: str
    age: int


class StudentCreate(StudentBase):
    """Every field is required."""
    name: StudentName
    class_label: ClassLabel
    age: StudentAge


class StudentUpdate(BaseModel):
    """
    Partial update payload.

    A field left out of the request is skipped; a field that is present,
    even as null, goes through the same rules as on create.
    """
    name: StudentName = None
    class_label: ClassLabel = None
    age: StudentAge = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class StudentInDB(StudentBase):
    """Stored row as read back; input rules are not re-applied."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass
