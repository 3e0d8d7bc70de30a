"""Operation Outcomes — explicit success/failure values returned by the resource service.

Invariants:
    - Every service operation returns exactly one of Ok or Failed
    - Failed always carries a ResourceError; unexpected exceptions are never wrapped here,
      they propagate to the global handler

Design Decisions:
    - Tagged values over raise/catch for expected failures: the HTTP boundary translates
      once, no exception travels through intermediate layers
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from resource_api.core.errors import ResourceError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    error: ResourceError


Outcome = Union[Ok[T], Failed]
