"""Default value dumper: captured matcher parameters → printable text."""

from __future__ import annotations

from rich.pretty import pretty_repr

DUMP_MAX_WIDTH = 100


def dump(value: object) -> str:
    """Render an arbitrary value for a failure report.

    Strings are quoted, containers are expanded over several lines
    once they exceed DUMP_MAX_WIDTH.
    """
    return pretty_repr(value, max_width=DUMP_MAX_WIDTH)
