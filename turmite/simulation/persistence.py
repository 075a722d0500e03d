"""Parquet persistence helpers for turmite trace streams."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from turmite.io.schemas import TRACE_SCHEMA


def new_trace_columns() -> dict[str, list[object]]:
    """Return empty column buffers keyed by ``TRACE_SCHEMA`` field names."""
    return {field.name: [] for field in TRACE_SCHEMA}


def flush_trace_columns(
    trace_columns: dict[str, list[object]],
    trace_log_path: Path,
    trace_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["run_id"]:
        return trace_writer
    trace_table = pa.Table.from_pydict(trace_columns, schema=TRACE_SCHEMA)
    if trace_writer is None:
        trace_writer = pq.ParquetWriter(trace_log_path, TRACE_SCHEMA)
    trace_writer.write_table(trace_table)
    for values in trace_columns.values():
        values.clear()
    return trace_writer
