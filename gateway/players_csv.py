"""
CSV dump and load of the players table.

Each line is `"email","pseudo","serverURL",score`: quoted strings, a bare
integer score, no header and no trailing newline.
"""
import csv
import io
from typing import BinaryIO, Iterable, List

from .exceptions import ImportFailed
from .models import PlayerRecord

FIELD_COUNT = 4


def export_players(records: Iterable[PlayerRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator='\n')
    for record in records:
        writer.writerow([record.email, record.pseudo, record.server_url, int(record.score)])
    return buffer.getvalue().rstrip('\n')


def parse_players(stream: BinaryIO, encoding: str = 'utf-8') -> List[PlayerRecord]:
    """Read player rows from an uploaded CSV stream. Blank lines are skipped."""
    try:
        text = stream.read().decode(encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFailed(f"Could not read players CSV: {e}")

    records = []
    try:
        for line_no, row in enumerate(csv.reader(io.StringIO(text)), start=1):
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) != FIELD_COUNT:
                raise ImportFailed(
                    f"Line {line_no}: expected {FIELD_COUNT} fields, got {len(row)}",
                    {'line': line_no}
                )
            email, pseudo, server_url, score = (cell.strip() for cell in row)
            try:
                score = int(score)
            except ValueError:
                raise ImportFailed(f"Line {line_no}: score {score!r} is not an integer", {'line': line_no})
            records.append(PlayerRecord(email=email, pseudo=pseudo, server_url=server_url, score=score))
    except csv.Error as e:
        raise ImportFailed(f"Malformed players CSV: {e}")

    return records
