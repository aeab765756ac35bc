"""Tagged results returned by the public query functions.

A query returns either :class:`Ok` carrying its value or :class:`Err`
carrying a :class:`~ncaa_boxscore.ingest.errors.ResultCode`.  Callers that
need the legacy single-number encoding (statistic on success, negative code
on failure) can use :func:`to_sentinel`.
"""

from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

from ncaa_boxscore.ingest.errors import ResultCode

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful query outcome."""

    value: T

    @property
    def code(self) -> ResultCode:
        return ResultCode.SUCCESS

    @property
    def is_ok(self) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class Err:
    """Failed query outcome.

    Attributes:
        code: The failure's result code (never ``SUCCESS``).
        message: Human-readable detail from the underlying exception.
    """

    code: ResultCode
    message: str = ""

    def __post_init__(self) -> None:
        if self.code is ResultCode.SUCCESS:
            msg = "Err cannot carry ResultCode.SUCCESS"
            raise ValueError(msg)

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok[T] | Err


def to_sentinel(result: Ok[float] | Ok[int] | Ok[None] | Err) -> float:
    """Collapse *result* into the overloaded numeric channel.

    ``Ok(None)`` (file-producing queries) maps to ``0``; ``Ok(value)`` maps to
    the value; ``Err`` maps to its negative code.
    """
    if isinstance(result, Err):
        return int(result.code)
    if result.value is None:
        return int(ResultCode.SUCCESS)
    return result.value
