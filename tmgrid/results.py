"""
Tagged present/absent results.

A lookup that legitimately finds nothing (a southern hemisphere point handed
to a northern national grid, a point with no registered parcel) returns
Absent. A lookup that failed raises instead, so "no data" and "request
failed" can never be confused.
"""

__all__ = ['Absent', 'Present', 'Result']

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Present(Generic[T]):
    """A result holding a value"""
    value: T

    @property
    def present(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Absent:
    """A result with nothing in it, and why"""
    reason: str = ''

    @property
    def present(self) -> bool:
        return False

    def unwrap(self):
        raise ValueError(f'Result is absent: {self.reason}' if self.reason else 'Result is absent')


Result = Union[Present[T], Absent]
