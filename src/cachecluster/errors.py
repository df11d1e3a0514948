from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cachecluster.constants import NOT_FOUND_ERROR_CODES


class CacheClusterError(Exception):
    """Base error type for the cachecluster package."""


class ConfigError(CacheClusterError):
    """Raised when configuration or a manifest cannot be loaded or validated."""


class AuthError(CacheClusterError):
    """Raised when no usable credentials can be resolved for a profile."""


class RequestError(CacheClusterError):
    """Raised when an HTTP request fails before a response is received."""


@dataclass(slots=True)
class APIError(RequestError):
    """Represents a non-success cache provider API response."""

    status_code: int
    message: str
    code: str | None = None
    body: str | None = None

    def __str__(self) -> str:
        label = f"HTTP {self.status_code}"
        if self.code:
            label = f"{label} {self.code}"
        if self.body:
            return f"{label}: {self.message} ({self.body})"
        return f"{label}: {self.message}"

    def __hash__(self) -> int:
        return hash((type(self), self.status_code, self.message, self.code, self.body))


class NotFoundError(APIError):
    """The remote cache cluster does not exist."""


def is_not_found(exc: BaseException) -> bool:
    if isinstance(exc, NotFoundError):
        return True
    if isinstance(exc, APIError):
        return exc.status_code == 404 or exc.code in NOT_FOUND_ERROR_CODES
    return False


@dataclass(slots=True)
class LifecycleError(CacheClusterError):
    """A lifecycle call failed.

    ``cause`` keeps the original error for comparison and unwrapping; the class
    carries a short operation tag so callers can tell which call failed without
    inspecting the cause. Two lifecycle errors are equal when they are of the
    same class and wrap equal causes. The hash follows the cause's type and
    rendering so equal errors hash alike.
    """

    cause: BaseException

    operation: ClassVar[str] = "reconcile"
    message: ClassVar[str] = "cannot reconcile cache cluster"

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"

    def __hash__(self) -> int:
        return hash((type(self), type(self.cause), str(self.cause)))


class ConnectError(LifecycleError):
    operation = "connect"
    message = "cannot connect to cache cluster provider"


class ObserveError(LifecycleError):
    operation = "observe"
    message = "cannot describe cache cluster"


class CreateError(LifecycleError):
    operation = "create"
    message = "cannot create cache cluster"


class UpdateError(LifecycleError):
    operation = "update"
    message = "cannot modify cache cluster"


class DeleteError(LifecycleError):
    operation = "delete"
    message = "cannot delete cache cluster"
