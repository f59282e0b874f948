"""
Exception classes for maze_generator with helpful error messages.

Recoverable failures raised to callers:
- InvalidDimensionsError: width or height outside the supported range
- OutOfBoundsError: coordinate lookup outside the grid (accessors only)
- ConfigurationError: unknown algorithm, bad seed or bad algorithm option

MazeInvariantError is deliberately not a MazeError: it signals a bug in a
generator (asymmetric passages, carving off the grid), never bad input.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation errors with context and suggestions.

    The formatted message includes:
    - Clear error description prefixed with the component name
    - Suggested action for resolution
    - Error code
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
        self.component = component or "maze_generator"
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


class InvalidDimensionsError(MazeError, ValueError):
    """Exception raised when a maze is requested with unusable dimensions."""

    def __init__(self, width: Any, height: Any, component: str | None = None):
        self.width = width
        self.height = height

        diagnostic_data = {
            "width": repr(width),
            "height": repr(height),
        }

        super().__init__(
            message=f"Invalid maze dimensions {width!r} x {height!r}",
            component=component,
            suggested_action=_generate_dimension_suggestions(width, height),
            error_code="INVALID_DIMENSIONS",
            diagnostic_data=diagnostic_data,
        )


class OutOfBoundsError(MazeError, IndexError):
    """Exception raised when a coordinate lies outside the maze grid."""

    def __init__(self, coordinates: Any, width: int, height: int, component: str | None = None):
        self.coordinates = coordinates
        self.width = width
        self.height = height

        diagnostic_data = {
            "coordinates": str(coordinates),
            "valid_x": f"[0, {width - 1}]",
            "valid_y": f"[0, {height - 1}]",
        }

        super().__init__(
            message=f"Coordinates {coordinates} lie outside the {width} x {height} grid",
            component=component,
            suggested_action="Check coordinates with contains() before looking up a field",
            error_code="OUT_OF_BOUNDS",
            diagnostic_data=diagnostic_data,
        )


class ConfigurationError(MazeError, ValueError):
    """Exception raised when generator configuration is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        valid_choices: list[str] | None = None,
        component: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if valid_choices:
            diagnostic_data["valid_choices"] = ", ".join(valid_choices)

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range, valid_choices
        )

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class MazeInvariantError(RuntimeError):
    """Internal consistency violation inside a generator (a bug, not bad input)."""


# Helper functions for generating specific suggestions


def _generate_dimension_suggestions(width: Any, height: Any) -> str:
    """Generate specific suggestions for dimension errors."""

    suggestions = []

    for name, value in (("width", width), ("height", height)):
        if not _is_integer(value):
            suggestions.append(f"Pass {name} as a positive integer")
        elif value < 1:
            suggestions.append(f"Increase {name} to at least 1")

    return " | ".join(suggestions) if suggestions else "Use width >= 1 and height >= 1"


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
    valid_choices: list[str] | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if valid_choices:
        suggestions.append(f"Choose one of: {', '.join(valid_choices)}")

    if parameter_name == "seed":
        suggestions.append("Seeds must be unsigned 64-bit integers, or None for fresh entropy")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios

MAX_SEED = 2**64 - 1


def _is_integer(value: Any) -> bool:
    """Accept Python and numpy integers; bool is not a size or a seed."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_dimensions(width: Any, height: Any, component: str | None = None) -> None:
    """Validate that width and height are integers >= 1."""
    for value in (width, height):
        if not _is_integer(value) or value < 1:
            raise InvalidDimensionsError(width, height, component=component)


def validate_seed(seed: Any, component: str | None = None) -> None:
    """Validate that seed is None or an unsigned 64-bit integer."""
    if seed is None:
        return

    if not _is_integer(seed):
        raise ConfigurationError(
            parameter_name="seed",
            provided_value=seed,
            expected_type=int,
            component=component,
        )

    if not (0 <= int(seed) <= MAX_SEED):
        raise ConfigurationError(
            parameter_name="seed",
            provided_value=seed,
            valid_range=(0, MAX_SEED),
            component=component,
        )


def validate_probability(value: Any, parameter_name: str, component: str | None = None) -> None:
    """Validate that value is a probability strictly between 0 and 1."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=float,
            component=component,
        )

    if not (0.0 < value < 1.0):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=(0.0, 1.0),
            component=component,
        )
