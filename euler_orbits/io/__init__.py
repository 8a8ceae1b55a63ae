"""I/O utilities for step records and body state."""

from euler_orbits.io.record_writer import RecordWriter, format_record, parse_record, read_records
from euler_orbits.io.state_io import save_state, load_state

__all__ = ["RecordWriter", "format_record", "parse_record", "read_records", "save_state", "load_state"]
