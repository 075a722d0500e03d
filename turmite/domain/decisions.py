"""Decision tables driving a two-state, two-color turmite.

Each table maps the 2-bit key ``(state_bit, color_bit)`` to a ``Decision``
stored at index ``state_bit * 2 + color_bit``. The catalog entries encode
known emergent patterns; changing a single entry changes the pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from turmite.domain.orientation import Rotate

TABLE_SIZE = 4
"""Number of (state_bit, color_bit) combinations."""


@dataclass(frozen=True)
class Decision:
    """What to do for one (state, color) input pair."""

    rotate: Rotate
    color: bool
    state: bool


@dataclass(frozen=True)
class DecisionTable:
    """Named, immutable four-entry lookup table."""

    name: str
    table: tuple[Decision, ...]

    def __post_init__(self) -> None:
        if len(self.table) != TABLE_SIZE:
            raise ValueError(f"decision table {self.name!r} must have exactly {TABLE_SIZE} entries")

    def decide(self, state_bit: bool, color_bit: bool) -> Decision:
        """Return the decision for the current internal state and cell color."""
        return self.table[int(state_bit) * 2 + int(color_bit)]

    def to_payload(self) -> dict[str, object]:
        """JSON-serializable view of the table."""
        return {
            "name": self.name,
            "table": [
                {"rotate": d.rotate.value, "color": d.color, "state": d.state}
                for d in self.table
            ],
        }


def decide(table: DecisionTable, state_bit: bool, color_bit: bool) -> Decision:
    """Module-level alias of :meth:`DecisionTable.decide`."""
    return table.decide(state_bit, color_bit)


def _table(name: str, *rows: tuple[Rotate, bool, bool]) -> DecisionTable:
    return DecisionTable(
        name=name,
        table=tuple(Decision(rotate=r, color=c, state=s) for r, c, s in rows),
    )


_CW = Rotate.CLOCKWISE
_CCW = Rotate.COUNTER_CLOCKWISE
_NOOP = Rotate.NOOP
_UTURN = Rotate.UTURN

# Rows are (rotate, new color, new state) for keys 00, 01, 10, 11.
DECISION_TABLES: tuple[DecisionTable, ...] = (
    _table(
        "fibonacci",
        (_CCW, True, True),
        (_CCW, True, True),
        (_CW, True, True),
        (_NOOP, False, False),
    ),
    _table(
        "langton",
        (_CW, True, False),
        (_CCW, False, False),
        (_CW, True, False),
        (_CCW, False, False),
    ),
    _table(
        "chaotic_one",
        (_CW, True, False),
        (_CW, True, True),
        (_NOOP, False, False),
        (_NOOP, False, True),
    ),
    _table(
        "chaotic_two",
        (_CW, True, True),
        (_CCW, False, True),
        (_NOOP, True, False),
        (_NOOP, False, True),
    ),
    _table(
        "chaotic_three",
        (_CCW, True, True),
        (_CCW, False, True),
        (_CW, True, True),
        (_CCW, False, False),
    ),
    _table(
        "chaotic_four",
        (_CCW, True, True),
        (_CCW, False, True),
        (_NOOP, True, False),
        (_NOOP, True, True),
    ),
    _table(
        "coral",
        (_CW, True, True),
        (_CCW, True, True),
        (_CW, True, True),
        (_CCW, False, False),
    ),
    _table(
        "square_one",
        (_CCW, True, False),
        (_CW, True, True),
        (_CW, False, False),
        (_CCW, False, True),
    ),
    _table(
        "square_two",
        (_CW, False, True),
        (_CCW, False, False),
        (_NOOP, True, False),
        (_UTURN, True, True),
    ),
    _table(
        "counter_one",
        (_NOOP, False, True),
        (_UTURN, False, True),
        (_CW, True, True),
        (_NOOP, False, True),
    ),
    _table(
        "counter_two",
        (_CW, True, True),
        (_NOOP, False, True),
        (_NOOP, False, False),
        (_CCW, True, True),
    ),
    _table(
        "spiral_one",
        (_NOOP, True, True),
        (_CCW, True, False),
        (_CW, True, True),
        (_NOOP, False, False),
    ),
    _table(
        "spiral_two",
        (_CCW, True, False),
        (_CW, False, True),
        (_CW, True, False),
        (_CCW, False, True),
    ),
    _table(
        "spiral_three",
        (_UTURN, True, False),
        (_NOOP, False, True),
        (_CCW, False, False),
        (_CW, False, True),
    ),
    _table(
        "ladder",
        (_NOOP, False, True),
        (_UTURN, True, True),
        (_CCW, True, False),
        (_NOOP, True, True),
    ),
    _table(
        "dixie",
        (_CW, False, True),
        (_CCW, False, False),
        (_UTURN, True, True),
        (_CW, False, False),
    ),
)

TABLE_NAMES: tuple[str, ...] = tuple(t.name for t in DECISION_TABLES)

_TABLES_BY_NAME: dict[str, DecisionTable] = {t.name: t for t in DECISION_TABLES}


def random_table(rng: Random) -> DecisionTable:
    """Pick a catalog table uniformly at random."""
    return rng.choice(DECISION_TABLES)


def get_table(name: str) -> DecisionTable:
    """Look up a catalog table by name."""
    if name not in _TABLES_BY_NAME:
        valid = ", ".join(TABLE_NAMES)
        raise ValueError(f"Unknown decision table {name!r}; available: {valid}")
    return _TABLES_BY_NAME[name]
