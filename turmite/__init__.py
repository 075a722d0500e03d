"""Turmite simulation: a two-state Turing-machine ant on a bounded binary grid."""

from turmite.domain import (
    DECISION_TABLES,
    TABLE_NAMES,
    Decision,
    DecisionTable,
    DrawingSurface,
    Grid,
    Orientation,
    Rotate,
    Turmite,
)

__all__ = [
    "DECISION_TABLES",
    "Decision",
    "DecisionTable",
    "DrawingSurface",
    "Grid",
    "Orientation",
    "Rotate",
    "TABLE_NAMES",
    "Turmite",
]
