from backend.engine.gamevalidator.validator import (
    ValidationReport,
    count_inversions,
    is_solvable,
    shape_error,
    validate,
)

__all__ = [
    "ValidationReport",
    "count_inversions",
    "is_solvable",
    "shape_error",
    "validate",
]
