"""Domain layer: orientation algebra, decision catalog, grid, and turmite engine."""

from turmite.domain.decisions import (
    DECISION_TABLES,
    TABLE_NAMES,
    Decision,
    DecisionTable,
    decide,
    get_table,
    random_table,
)
from turmite.domain.grid import Grid
from turmite.domain.orientation import (
    Orientation,
    Rotate,
    apply_rotation,
    clockwise,
    counter_clockwise,
    step_delta,
    uturn,
)
from turmite.domain.turmite import DrawingSurface, Turmite

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
    "apply_rotation",
    "clockwise",
    "counter_clockwise",
    "decide",
    "get_table",
    "random_table",
    "step_delta",
    "uturn",
]
