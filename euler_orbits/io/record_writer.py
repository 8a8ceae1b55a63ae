"""Tab-separated step records.

Each line holds elapsed seconds, body 0 x/y, body 1 x/y and their distance.
Floats are written with ``repr``, the shortest text that parses back to the
same double, so plots read exactly what was simulated.
"""

from pathlib import Path
from typing import IO, Iterator, List, Union

from euler_orbits.physics.simulator import StepRecord

FIELD_SEPARATOR = "\t"


def format_record(record: StepRecord) -> str:
    """Format one record as a tab-separated line without the newline."""
    return FIELD_SEPARATOR.join(repr(float(value)) for value in record)


def parse_record(line: str) -> StepRecord:
    """Parse a line produced by format_record."""
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != len(StepRecord._fields):
        raise ValueError(f"Expected {len(StepRecord._fields)} fields, got {len(fields)}: {line!r}")
    return StepRecord(*(float(value) for value in fields))


class RecordWriter:
    """Record sink writing one line per StepRecord to a text stream."""

    def __init__(self, stream: IO[str]):
        self.stream = stream
        self.count = 0

    def __call__(self, record: StepRecord):
        self.stream.write(format_record(record) + "\n")
        self.count += 1


def iter_records(stream: IO[str]) -> Iterator[StepRecord]:
    for line in stream:
        if line.strip():
            yield parse_record(line)


def read_records(source: Union[str, Path, IO[str]]) -> List[StepRecord]:
    """Read all records from a path or an open text stream."""
    if isinstance(source, (str, Path)):
        with open(source, 'r') as f:
            return list(iter_records(f))
    return list(iter_records(source))
