"""Daily puzzle solutions and the interval range-mapping engine they share."""

from .ranges import (
    EmptyResultError,
    Interval,
    ShiftRule,
    Stage,
    StageLookupError,
    apply_rule,
    apply_stage,
    run_chain,
)
from .util import PuzzleFormatError

__all__ = [
    "Interval",
    "ShiftRule",
    "Stage",
    "apply_rule",
    "apply_stage",
    "run_chain",
    "PuzzleFormatError",
    "StageLookupError",
    "EmptyResultError",
]
