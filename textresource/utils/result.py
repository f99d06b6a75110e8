"""Result values and failure classification for resource loading"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class FailureKind(Enum):
    """Closed set of reasons a resource could not be loaded"""

    NOT_FOUND = "not_found"
    CREATE_FAILED = "create_failed"
    READ_FAILED = "read_failed"
    OTHER = "other"


@dataclass(frozen=True)
class FailureReason:
    """
    Why a load failed, with the underlying diagnostic kept for logging

    Attributes:
        kind: Failure classification
        name: Resource name the operation was attempted on
        detail: Diagnostic text from the storage facility
        errno: Platform error number, if the storage facility reported one
    """

    kind: FailureKind
    name: str
    detail: str = ""
    errno: Optional[int] = None

    @classmethod
    def from_error(cls, kind: FailureKind, name, error: BaseException) -> "FailureReason":
        """
        Build a failure reason from a caught storage error

        Args:
            kind: Failure classification
            name: Resource name (str or path-like)
            error: Exception raised by the storage facility

        Returns:
            FailureReason carrying the error's type, message and errno
        """
        message = str(error) or repr(error)
        return cls(
            kind=kind,
            name=str(name),
            detail=f"{type(error).__name__}: {message}",
            errno=getattr(error, "errno", None),
        )

    def __str__(self) -> str:
        text = f"{self.kind.value} ({self.name})"
        if self.detail:
            text += f": {self.detail}"
        return text


class ResourceLoadError(Exception):
    """Raised only when a caller chooses to abort on a failed load"""

    def __init__(self, reason: FailureReason):
        super().__init__(str(reason))
        self.reason = reason

    @property
    def kind(self) -> FailureKind:
        return self.reason.kind


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful load holding the resource content"""

    value: T

    def __bool__(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed load holding the failure reason"""

    error: FailureReason

    def __bool__(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    @property
    def kind(self) -> FailureKind:
        return self.error.kind

    def unwrap(self):
        raise ResourceLoadError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
