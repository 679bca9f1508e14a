from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    OK = 0
    WARNING = 1
    FAILURE = 2
    UNKNOWN = 3


class CheckError(RuntimeError):
    """Base for every error a check hands back to the harness."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.__cause__ = cause


class InputError(CheckError):
    pass


class ResolutionError(CheckError):
    pass


class TransportError(CheckError):
    pass


class ServerError(CheckError):
    pass


class UnknownOutcome(CheckError):
    pass


@dataclass(frozen=True)
class CheckResult:
    message: str
    status: Status
    error: CheckError | None = None
