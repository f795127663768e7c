"""
Response envelope shared by every route.

Success: {"success": true, "data": {...}, "error": null}
Failure: {"success": false, "data": null, "error": message, "code": code}
"""

import traceback
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    data: None = None
    error: str
    code: str


def success(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data, "error": None}


def error_payload(
    code: str, message: str, exc: Optional[BaseException] = None, with_stack: bool = False
) -> Dict[str, Any]:
    payload = {"success": False, "data": None, "error": message, "code": code}
    if with_stack and exc is not None:
        payload["error_stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return payload
