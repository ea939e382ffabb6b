"""
Error Types for Schema Decoding

Decoding an inbound payload is all-or-nothing: any deviation from the
declared shape surfaces as a single SchemaMismatch carrying one
ErrorDetail per offending location.
"""

from pydantic import BaseModel, Field, ValidationError


class ErrorCodes:
    """
    Standard error codes for decoding failures.

    These codes enable programmatic error handling by callers
    without parsing human-readable messages.
    """

    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    MISSING_FIELD = "MISSING_FIELD"
    WRONG_TYPE = "WRONG_TYPE"
    INVALID_JSON = "INVALID_JSON"


class ErrorDetail(BaseModel):
    """
    Detailed information about a single decoding error.

    Provides a machine-readable error code, a human-readable message,
    and the wire-key path of the value that failed.
    """

    code: str = Field(
        ...,
        description="Machine-readable error code for programmatic handling",
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
    )

    field: str | None = Field(
        default=None,
        description="Dotted wire-key path of the offending value, e.g. 'results.0.flagged'",
    )


def _code_for(error_type: str) -> str:
    if error_type == "missing":
        return ErrorCodes.MISSING_FIELD
    if error_type.startswith("json"):
        return ErrorCodes.INVALID_JSON
    return ErrorCodes.WRONG_TYPE


class SchemaMismatch(Exception):
    """Raised when an inbound payload does not conform to its schema."""

    code = ErrorCodes.SCHEMA_MISMATCH

    def __init__(self, message: str, details: list[ErrorDetail] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    @classmethod
    def from_validation_error(
        cls, schema_name: str, exc: ValidationError
    ) -> "SchemaMismatch":
        """
        Build a SchemaMismatch from a pydantic ValidationError.

        Args:
            schema_name: Name of the schema being decoded, used in the message
            exc: The validation error raised by pydantic

        Returns:
            SchemaMismatch with one ErrorDetail per pydantic error
        """
        details = [
            ErrorDetail(
                code=_code_for(error["type"]),
                message=error["msg"],
                field=".".join(str(part) for part in error["loc"]) or None,
            )
            for error in exc.errors()
        ]
        return cls(
            f"{schema_name} payload does not match schema "
            f"({len(details)} error{'s' if len(details) != 1 else ''})",
            details,
        )
