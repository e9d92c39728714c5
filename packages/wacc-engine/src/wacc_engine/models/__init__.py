"""
Convenience re-exports of data models.

All models are defined in ``wacc_engine.engine`` and re-exported here
for consumers who prefer ``from wacc_engine.models import WaccInputs``.
"""

from wacc_engine.engine import (
    DegenerateCapitalStructureError,
    InputError,
    MissingInputsError,
    WaccInputs,
    WaccResult,
)

__all__ = [
    "DegenerateCapitalStructureError",
    "InputError",
    "MissingInputsError",
    "WaccInputs",
    "WaccResult",
]
