from typing import Any, Optional

from pydantic import ValidationError


class AdvisoryError(Exception):
    """Base class for failures surfaced by the advisory flows and crop lookups."""

    kind: str = "advisory_error"

    def __init__(self, message: str, *, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.kind, "detail": self.message}
        if self.operation:
            payload["operation"] = self.operation
        return payload


class InputValidationError(AdvisoryError):
    """Raised before any external call when a request violates a field constraint."""

    kind = "input_validation_error"

    def __init__(
        self,
        field: str,
        constraint: str,
        *,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(f"{field}: {constraint}", operation=operation)
        self.field = field
        self.constraint = constraint

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        return payload

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, *, operation: Optional[str] = None
    ) -> "InputValidationError":
        # Report the first offending field; pydantic orders errors by field.
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "input"
        return cls(field, first.get("msg", "invalid value"), operation=operation)


class ExternalCallError(AdvisoryError):
    """The generative model or the document store could not be reached."""

    kind = "external_call_error"


class OutputValidationError(AdvisoryError):
    """The model answered, but the answer does not match the declared output shape."""

    kind = "output_validation_error"
