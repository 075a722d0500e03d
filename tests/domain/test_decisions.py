"""Tests for turmite.domain.decisions module."""

from __future__ import annotations

from collections import Counter
from random import Random

import pytest

from turmite.domain.decisions import (
    DECISION_TABLES,
    TABLE_NAMES,
    Decision,
    DecisionTable,
    decide,
    get_table,
    random_table,
)
from turmite.domain.orientation import Rotate

_CW = Rotate.CLOCKWISE
_CCW = Rotate.COUNTER_CLOCKWISE
_NOOP = Rotate.NOOP
_UTURN = Rotate.UTURN
T, F = True, False

EXPECTED_CATALOG = [
    ("fibonacci", [(_CCW, T, T), (_CCW, T, T), (_CW, T, T), (_NOOP, F, F)]),
    ("langton", [(_CW, T, F), (_CCW, F, F), (_CW, T, F), (_CCW, F, F)]),
    ("chaotic_one", [(_CW, T, F), (_CW, T, T), (_NOOP, F, F), (_NOOP, F, T)]),
    ("chaotic_two", [(_CW, T, T), (_CCW, F, T), (_NOOP, T, F), (_NOOP, F, T)]),
    ("chaotic_three", [(_CCW, T, T), (_CCW, F, T), (_CW, T, T), (_CCW, F, F)]),
    ("chaotic_four", [(_CCW, T, T), (_CCW, F, T), (_NOOP, T, F), (_NOOP, T, T)]),
    ("coral", [(_CW, T, T), (_CCW, T, T), (_CW, T, T), (_CCW, F, F)]),
    ("square_one", [(_CCW, T, F), (_CW, T, T), (_CW, F, F), (_CCW, F, T)]),
    ("square_two", [(_CW, F, T), (_CCW, F, F), (_NOOP, T, F), (_UTURN, T, T)]),
    ("counter_one", [(_NOOP, F, T), (_UTURN, F, T), (_CW, T, T), (_NOOP, F, T)]),
    ("counter_two", [(_CW, T, T), (_NOOP, F, T), (_NOOP, F, F), (_CCW, T, T)]),
    ("spiral_one", [(_NOOP, T, T), (_CCW, T, F), (_CW, T, T), (_NOOP, F, F)]),
    ("spiral_two", [(_CCW, T, F), (_CW, F, T), (_CW, T, F), (_CCW, F, T)]),
    ("spiral_three", [(_UTURN, T, F), (_NOOP, F, T), (_CCW, F, F), (_CW, F, T)]),
    ("ladder", [(_NOOP, F, T), (_UTURN, T, T), (_CCW, T, F), (_NOOP, T, T)]),
    ("dixie", [(_CW, F, T), (_CCW, F, F), (_UTURN, T, T), (_CW, F, F)]),
]

EXPECTED_NAMES = (
    "fibonacci",
    "langton",
    "chaotic_one",
    "chaotic_two",
    "chaotic_three",
    "chaotic_four",
    "coral",
    "square_one",
    "square_two",
    "counter_one",
    "counter_two",
    "spiral_one",
    "spiral_two",
    "spiral_three",
    "ladder",
    "dixie",
)


class TestCatalog:
    def test_catalog_names_in_order(self) -> None:
        assert TABLE_NAMES == EXPECTED_NAMES

    def test_names_are_unique(self) -> None:
        assert len(set(TABLE_NAMES)) == len(TABLE_NAMES)

    @pytest.mark.parametrize("table", DECISION_TABLES, ids=TABLE_NAMES)
    def test_every_input_maps_to_distinct_entry(self, table: DecisionTable) -> None:
        indices = set()
        for state_bit in (False, True):
            for color_bit in (False, True):
                decision = decide(table, state_bit, color_bit)
                assert isinstance(decision, Decision)
                index = int(state_bit) * 2 + int(color_bit)
                assert decision is table.table[index]
                indices.add(index)
        assert indices == {0, 1, 2, 3}

    @pytest.mark.parametrize(
        ("name", "rows"), EXPECTED_CATALOG, ids=[name for name, _ in EXPECTED_CATALOG]
    )
    def test_entries_verbatim(self, name: str, rows: list[tuple[Rotate, bool, bool]]) -> None:
        table = get_table(name)
        assert [(d.rotate, d.color, d.state) for d in table.table] == rows

    def test_rotation_usage_counts(self) -> None:
        counts = Counter(d.rotate for t in DECISION_TABLES for d in t.table)
        assert counts[Rotate.CLOCKWISE] == 20
        assert counts[Rotate.COUNTER_CLOCKWISE] == 22
        assert counts[Rotate.NOOP] == 17
        assert counts[Rotate.UTURN] == 5


class TestDecisionTable:
    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="exactly 4 entries"):
            DecisionTable(name="short", table=(Decision(Rotate.NOOP, False, False),))

    def test_tables_are_frozen(self) -> None:
        table = get_table("coral")
        with pytest.raises(AttributeError):
            table.name = "other"  # type: ignore[misc]

    def test_payload_round_trips_rotation_values(self) -> None:
        payload = get_table("ladder").to_payload()
        assert payload["name"] == "ladder"
        rows = payload["table"]
        assert isinstance(rows, list)
        assert [r["rotate"] for r in rows] == ["noop", "uturn", "counter_clockwise", "noop"]


class TestLookup:
    def test_get_table_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown decision table"):
            get_table("does_not_exist")

    def test_random_table_is_deterministic_per_seed(self) -> None:
        assert random_table(Random(7)) is random_table(Random(7))

    def test_random_table_covers_catalog(self) -> None:
        rng = Random(0)
        seen = {random_table(rng).name for _ in range(2_000)}
        assert seen == set(TABLE_NAMES)
