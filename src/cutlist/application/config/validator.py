"""Validation structures and cabinet advisory checks.

Validation is advisory: panel generation never consults it. The CLI and
the web API use the result to gate output and to pick an exit status.
"""

from dataclasses import dataclass, field
from typing import Any

from cutlist.application.config.adapter import config_to_cabinet, config_to_settings
from cutlist.application.config.loader import ConfigError
from cutlist.application.config.schemas import ProjectConfiguration
from cutlist.domain.errors import ConstructionConflictError
from cutlist.domain.generators import cabinet_issues
from cutlist.domain.settings import ConstructionSettings


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinets[0].drawer_heights")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [
                {"path": e.path, "message": e.message, "value": e.value}
                for e in self.errors
            ],
            "warnings": [
                {"path": w.path, "message": w.message, "suggestion": w.suggestion}
                for w in self.warnings
            ],
        }


def check_option_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Warn about option combinations the generators resolve silently."""
    result = ValidationResult()
    for index, cabinet in enumerate(config.cabinets):
        options = cabinet.options
        if options.inset_back and options.rabbet_back:
            result.add_warning(
                path=f"cabinets[{index}].options",
                message=(
                    f"Cabinet {cabinet.id} sets both inset_back and rabbet_back; "
                    "the inset back is used"
                ),
                suggestion="Set only one of inset_back or rabbet_back",
            )
    return result


def check_drawer_advisories(
    config: ProjectConfiguration, settings: ConstructionSettings
) -> ValidationResult:
    """Warn when a runner length is not in the configured catalogue."""
    result = ValidationResult()
    catalogue = settings.drawers.slider_lengths
    for index, cabinet in enumerate(config.cabinets):
        if cabinet.slider_length is None or cabinet.slider_length in catalogue:
            continue
        result.add_warning(
            path=f"cabinets[{index}].slider_length",
            message=f"Slider length {cabinet.slider_length:g} mm is not a stock runner length",
            suggestion=f"Use one of {', '.join(f'{s:g}' for s in catalogue)}",
        )
    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Perform full validation of a project.

    Construction conflicts and failed cabinet checks are errors; option
    combinations resolved by precedence and non-stock runner lengths are
    warnings.

    Args:
        config: A ProjectConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    try:
        settings = config_to_settings(config)
    except ConfigError as e:
        return result.add_error(path="settings", message=e.message)

    result.merge(check_option_advisories(config))
    result.merge(check_drawer_advisories(config, settings))

    for index, cabinet in enumerate(config.cabinets):
        try:
            spec = config_to_cabinet(cabinet)
        except ConstructionConflictError as e:
            result.add_error(path=f"cabinets[{index}].options", message=str(e))
            continue
        for issue in cabinet_issues(spec, settings):
            result.add_error(path=f"cabinets[{index}]", message=issue)
    return result
