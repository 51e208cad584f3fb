"""Outcome of a single pipeline stage."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The stage passed; ``value`` is handed to the next stage."""

    value: T


@dataclass(frozen=True)
class Failure:
    """The stage stopped the chain. ``error`` goes straight to the error normalizer."""

    error: Exception


StageResult = Union[Success[T], Failure]
