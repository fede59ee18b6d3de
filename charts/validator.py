"""Consistency checks for built chart configurations.

Built configurations are validated before they are handed to a page so that
shape problems surface as readable messages instead of blank canvases.
"""

from __future__ import annotations

from dataclasses import dataclass

from .palette import DEFAULT_PALETTE
from .schema import ChartConfiguration, family_for


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a chart configuration."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_configuration(config: ChartConfiguration) -> ValidationResult:
    """Validate the data block of a ChartConfiguration.

    Args:
        config: Configuration to check.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []
    family = family_for(config.chart_type)
    datasets = config.data.get("datasets") or []
    labels = config.data.get("labels")

    if not datasets:
        errors.append(f"Chart[{config.chart_type}].data.datasets must contain at least one dataset.")

    if family == "point":
        if labels is not None:
            errors.append(f"Chart[{config.chart_type}].data.labels must be omitted for point charts.")
        for idx, dataset in enumerate(datasets):
            points = dataset.get("data", [])
            if not all(isinstance(point, dict) and "x" in point and "y" in point for point in points):
                errors.append(f"Chart[{config.chart_type}].data.datasets[{idx}] must contain x/y point objects.")
            elif config.chart_type == "bubble" and not all("r" in point for point in points):
                errors.append(f"Chart[{config.chart_type}].data.datasets[{idx}] bubble points require a radius.")
    else:
        if labels is None:
            errors.append(f"Chart[{config.chart_type}].data.labels is required.")
        else:
            for idx, dataset in enumerate(datasets):
                size = len(dataset.get("data", []))
                if size != len(labels):
                    errors.append(
                        f"Chart[{config.chart_type}].data.datasets[{idx}] has {size} values for {len(labels)} labels."
                    )

    if family == "segment" and labels is not None:
        for idx, dataset in enumerate(datasets):
            colors = dataset.get("backgroundColor")
            if not isinstance(colors, list) or len(colors) != len(labels):
                errors.append(f"Chart[{config.chart_type}].data.datasets[{idx}] needs one backgroundColor per row.")
            elif len(labels) > len(DEFAULT_PALETTE):
                warnings.append(f"Chart[{config.chart_type}] has more segments than palette colors; colors repeat.")

    if family != "segment" and len(datasets) > len(DEFAULT_PALETTE):
        warnings.append(f"Chart[{config.chart_type}] has more datasets than palette colors; colors repeat.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
