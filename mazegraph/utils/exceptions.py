"""
Exception classes for mazegraph with helpful error messages.

Every error carries the component that raised it, an optional suggestion for
the caller, a stable error code and a small dictionary of diagnostic values.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation and extraction errors.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "mazegraph"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InputValidationError(MazeError, ValueError):
    """
    Exception raised for generator inputs that are not usable integers.

    A value that is not an integer at all gets ``INVALID_INPUT_TYPE``; an
    maze size at or below ``minimum_exclusive`` gets ``INPUT_TOO_SMALL``
    and any other parameter below its range gets ``INPUT_OUT_OF_RANGE``.
    """

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        minimum_exclusive: int = 2,
        expected_type: type | None = None,
        component: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
            "valid_range": f"> {minimum_exclusive}",
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__
            message = f"Expected an integer for {parameter_name}, got {provided_value!r}"
            error_code = "INVALID_INPUT_TYPE"
        elif parameter_name in ("width", "height"):
            message = f"Maze is too small to generate: {parameter_name}={provided_value!r}"
            error_code = "INPUT_TOO_SMALL"
        else:
            message = f"Value out of range: {parameter_name}={provided_value!r}"
            error_code = "INPUT_OUT_OF_RANGE"

        super().__init__(
            message=message,
            component=component,
            suggested_action=f"Use an integer {parameter_name} of at least {minimum_exclusive + 1}",
            error_code=error_code,
            diagnostic_data=diagnostic_data,
        )


class ImageAccessError(MazeError):
    """Exception raised when a maze image is missing or cannot be decoded."""

    def __init__(self, path: Any, reason: str, component: str | None = None):
        self.path = path
        self.reason = reason

        super().__init__(
            message=f"Failed to open: {path}",
            component=component,
            suggested_action="Check that the file exists and is a readable raster image (BMP, PNG, ...)",
            error_code="IMAGE_ACCESS_FAILURE",
            diagnostic_data={"path": str(path), "reason": reason},
        )


class UnexpectedDirectionError(MazeError, LookupError):
    """Exception raised when a value outside the four compass directions reaches direction logic."""

    def __init__(self, value: Any, component: str | None = None):
        self.value = value

        super().__init__(
            message=f"Unexpected value for direction: {value!r}",
            component=component,
            error_code="UNEXPECTED_DIRECTION",
            diagnostic_data={"provided_type": type(value).__name__},
        )
