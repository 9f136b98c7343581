"""
Element-wise application of prefix operations over rows.

A PrefixError on one row is recorded in that row's outcome and never
stops the remaining rows.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ipprefix.config import get_config
from ipprefix.logging_config import track_error
from ipprefix.prefix.errors import ErrorKind, PrefixError, render_error


@dataclass
class RowOutcome:
    """Result of one row: a value or a classified error."""
    index: int
    value: Any = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def apply_rows(
    func: Callable[..., Any],
    rows: Iterable[Any],
    detailed: bool | None = None,
) -> list[RowOutcome]:
    """Apply func to each row and collect one outcome per row.

    Args:
        func: Single-value operation, e.g. make_prefix
        rows: Input values; tuples are unpacked into positional arguments
        detailed: Include error messages; defaults to the configured mode

    Returns:
        Outcomes in input order
    """
    if detailed is None:
        detailed = get_config().detailed_errors

    outcomes = []
    for index, row in enumerate(rows):
        args = row if isinstance(row, tuple) else (row,)
        try:
            value = func(*args)
        except PrefixError as e:
            message = render_error(e.error, detailed)
            track_error(e.kind.value, message, {"row": index})
            outcomes.append(RowOutcome(index=index, error_kind=e.kind, message=message))
        else:
            outcomes.append(RowOutcome(index=index, value=value))
    return outcomes
