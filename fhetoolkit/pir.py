"""Private information retrieval: select a record from a small database."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DB_SIZE = 3


def query_record(index: int, database: Sequence[str]) -> str:
    """Return the record at ``index`` in ``database``.

    Raises IndexError when ``index`` is outside ``[0, len(database))``.
    """
    if not 0 <= index < len(database):
        raise IndexError(f"index {index} out of range [0, {len(database)})")
    return database[index]


class CloudService:
    """Hosts a database and answers queries against it."""

    def __init__(self, database: Sequence[str]) -> None:
        self._database = tuple(database)

    def query_record(self, index: int) -> str:
        """Return the hosted record at ``index``."""
        return query_record(index, self._database)


def _read_line() -> str:
    return sys.stdin.readline().rstrip("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a database from standard input, then answer index queries."""
    if argv is None:
        argv = sys.argv[1:]
    records: list[str] = []
    while len(records) < DB_SIZE:
        print(
            "Please enter a single character for storage "
            f"({DB_SIZE - len(records)} more; ENTER to quit): ",
            end="",
            flush=True,
        )
        line = _read_line()
        if not line:
            print("No input provided.", file=sys.stderr)
            return 1
        if len(line) == 1:
            records.append(line)
        else:
            print(f"Invalid argument: '{line}'.", file=sys.stderr)

    print("Establishing connection.")
    service = CloudService(records)

    while True:
        print(
            f"Please enter a valid index [0, {DB_SIZE}) (ENTER to quit): ",
            end="",
            flush=True,
        )
        line = _read_line()
        if not line:
            print("Closing connection.")
            break
        try:
            index = int(line)
        except ValueError:
            index = -1
        if not 0 <= index < DB_SIZE:
            print(f"Invalid argument: '{line}'.", file=sys.stderr)
            continue
        print("Querying the database...")
        result = service.query_record(index)
        print(f"Result: '{result}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())