"""Two-variant outcome of a request."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import RestError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: RestError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]
