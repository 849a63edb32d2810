# taskboard/utils/exceptions.py
"""Operation errors

Every error raised while running an operation ends up in the ``errors`` list
of the response envelope. None of them is a transport failure.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class OperationError(Exception):
    """Base class for errors reported inside the response envelope"""

    code = ErrorCode.INTERNAL_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.details = details or []
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        extensions: Dict[str, Any] = {"code": self.code.value}
        if self.details:
            extensions["details"] = self.details
        return {"message": self.message, "extensions": extensions}


class NotFoundError(OperationError):
    code = ErrorCode.NOT_FOUND
    default_message = "Not found"

    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} not found")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["extensions"]["resource"] = self.resource_type
        if self.resource_id is not None:
            data["extensions"]["resourceId"] = self.resource_id
        return data


class InputValidationError(OperationError):
    code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid input"

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "InputValidationError":
        """Flatten a pydantic ValidationError into a readable message"""
        details = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            details.append({"field": location, "message": error["msg"]})

        if details:
            first = details[0]
            message = f"Invalid value for '{first['field']}': {first['message']}" if first["field"] else first["message"]
        else:
            message = cls.default_message
        return cls(message, details)


class UnknownOperationError(OperationError):
    code = ErrorCode.UNKNOWN_OPERATION
    default_message = "Unknown query"

    def __init__(self, operation_name: Optional[str] = None):
        self.operation_name = operation_name
        super().__init__()
