from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from app.api.deps import get_student_resource
from app.schemas.student import Student
from app.services.student.resource import StudentResource

router = APIRouter()

_ERROR = {"description": "Error envelope: error, plus message or messages"}


@router.get(
    "",
    response_model=List[Student],
    responses={500: _ERROR},
)
def list_students(resource: StudentResource = Depends(get_student_resource)) -> Response:
    """
    List every student
    """
    return resource.list().to_response()


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    responses={422: _ERROR, 500: _ERROR},
)
def create_student(
    payload: Any = Body(...),
    resource: StudentResource = Depends(get_student_resource)
) -> Response:
    """
    Create a student

    - **name**: letters and spaces, at most 255 characters
    - **class_label**: e.g. "XII IPA 1", at most 10 characters
    - **age**: 6 to 18
    """
    return resource.create(payload).to_response()


@router.get(
    "/{student_id}",
    response_model=Student,
    responses={404: _ERROR},
)
def get_student(
    student_id: int,
    resource: StudentResource = Depends(get_student_resource)
) -> Response:
    """
    Fetch one student by ID
    """
    return resource.get(student_id).to_response()


@router.api_route(
    "/{student_id}",
    methods=["PUT", "PATCH"],
    response_model=Student,
    responses={404: _ERROR, 422: _ERROR, 500: _ERROR},
)
def update_student(
    student_id: int,
    payload: Any = Body(...),
    resource: StudentResource = Depends(get_student_resource)
) -> Response:
    """
    Update the supplied fields of a student; omitted fields stay as they are
    """
    return resource.update(student_id, payload).to_response()


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={500: _ERROR},
)
def delete_student(
    student_id: int,
    resource: StudentResource = Depends(get_student_resource)
) -> Response:
    """
    Delete a student
    """
    return resource.delete(student_id).to_response()
