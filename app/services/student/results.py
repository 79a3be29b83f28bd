"""
Outcomes returned by StudentResource.

Every operation hands back exactly one of these; the endpoint layer only
calls ``to_response()`` and never inspects which variant it got.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class _Outcome:
    status_code: int

    def body(self) -> Any:
        raise NotImplementedError

    def to_response(self) -> Response:
        if self.status_code == status.HTTP_204_NO_CONTENT:
            return Response(status_code=self.status_code)
        return JSONResponse(status_code=self.status_code, content=jsonable_encoder(self.body()))


def _error_body(error: str, message: Optional[str]) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error}
    if message is not None:
        body["message"] = message
    return body


@dataclass
class Ok(_Outcome):
    value: Any = None
    status_code: int = status.HTTP_200_OK

    def body(self) -> Any:
        return self.value


@dataclass
class ValidationFailed(_Outcome):
    messages: Dict[str, List[str]] = field(default_factory=dict)
    status_code: int = 422  # Unprocessable Entity

    def body(self) -> Dict[str, Any]:
        return {"error": "validation failed", "messages": self.messages}


@dataclass
class NotFound(_Outcome):
    message: Optional[str] = None
    error: str = "student not found"
    status_code: int = status.HTTP_404_NOT_FOUND

    def body(self) -> Dict[str, Any]:
        return _error_body(self.error, self.message)


@dataclass
class StoreFailed(_Outcome):
    error: str
    message: Optional[str] = None
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def body(self) -> Dict[str, Any]:
        return _error_body(self.error, self.message)


StudentResult = Union[Ok, ValidationFailed, NotFound, StoreFailed]
