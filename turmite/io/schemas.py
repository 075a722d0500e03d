"""Parquet schema definitions for turmite run artifacts.

All Arrow schemas used for persisting per-tick traces and per-run summaries
are centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("orientation", pa.string()),
        ("state", pa.bool_()),
        ("color", pa.bool_()),
        ("active", pa.bool_()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("table_name", pa.string()),
        ("seed", pa.int64()),
        ("ticks", pa.int64()),
        ("exited", pa.bool_()),
        ("final_x", pa.int64()),
        ("final_y", pa.int64()),
        ("filled_cells", pa.int64()),
    ]
)
