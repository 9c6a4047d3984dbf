from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidInputError


@dataclass(frozen=True)
class TransactionRecord:
    """One input line: the two approved parents (1-indexed) and a timestamp."""

    left_parent_id: int
    right_parent_id: int
    timestamp: int | None


def read_text(path: Path | str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _parse_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidInputError(f"Line {line_no}: '{token}' is not an integer.") from None


def parse_transactions(text: str) -> tuple[int | None, list[TransactionRecord]]:
    """Parse a transaction database into ``(declared_count, records)``.

    The first line holds the transaction count; it comes back as ``None`` when
    it is not an integer so the builder can reject the file. Every following
    non-blank line is ``<left> <right> [<timestamp>]``. A line without a
    timestamp yields a record whose timestamp is ``None``.
    """
    lines = text.strip().splitlines()
    if not lines:
        return None, []

    try:
        count: int | None = int(lines[0].strip())
    except ValueError:
        count = None

    records: list[TransactionRecord] = []
    for line_no, line in enumerate(lines[1:], start=2):
        fields = line.split()
        if not fields:
            continue
        if len(fields) not in (2, 3):
            raise InvalidInputError(
                f"Line {line_no}: expected '<left> <right> <timestamp>', got {line.strip()!r}."
            )
        left, right = (_parse_int(f, line_no) for f in fields[:2])
        timestamp = _parse_int(fields[2], line_no) if len(fields) == 3 else None
        records.append(TransactionRecord(left, right, timestamp))
    return count, records
