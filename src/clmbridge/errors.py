"""Error taxonomy for host calls and record resolution.

Three kinds of failure exist:
- host_call_failure: the host callback reported failure or returned no usable payload
- not_found: a query returned zero rows where one was required
- missing_input: a required identifier/argument was absent or empty

Which layer surfaces them is fixed: queries degrade to empty data,
navigation logs and stops, typed lookups convert them into envelopes.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kind of failure."""

    HOST_CALL_FAILURE = "host_call_failure"
    NOT_FOUND = "not_found"
    MISSING_INPUT = "missing_input"


class CLMBridgeError(Exception):
    """Base exception for clmbridge errors."""

    kind: ErrorKind = ErrorKind.HOST_CALL_FAILURE

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.details = details or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class HostCallFailure(CLMBridgeError):
    """The host reported failure for a bridged call."""

    kind = ErrorKind.HOST_CALL_FAILURE

    def __init__(
        self,
        message: str,
        operation: str = "",
        response: Any = None,
    ):
        super().__init__(message, {"operation": operation})
        self.operation = operation
        self.response = response


class NotFoundError(CLMBridgeError):
    """A lookup that required a record returned none."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, subject: str, key: str = ""):
        message = f"No {subject} record found"
        if key:
            message = f"{message} for '{key}'"
        super().__init__(message, {"subject": subject, "key": key})
        self.subject = subject
        self.key = key


class MissingInputError(CLMBridgeError):
    """A required argument was absent or empty."""

    kind = ErrorKind.MISSING_INPUT

    def __init__(self, argument: str, message: str = ""):
        super().__init__(message or f"{argument} is missing", {"argument": argument})
        self.argument = argument
