from __future__ import annotations
from dataclasses import dataclass


class FileReadError(IOError):
    """Raised when a resource cannot be read, locally or over the network."""

    def __init__(self, path: str, cause: BaseException | None = None, status: str | None = None):
        self.path = path
        self.cause = cause
        self.status = status
        message = f"{path}: Read failed"
        if status:
            message = f"{message}: {status}"
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


@dataclass(slots=True)
class ReadResult:
    path: str
    success: bool
    data: str | bytes | None
    error: FileReadError | None

    @classmethod
    def ok(cls, path: str, data: str | bytes) -> ReadResult:
        return cls(path=path, success=True, data=data, error=None)

    @classmethod
    def failed(cls, path: str, *, cause: BaseException | None = None,
               status: str | None = None) -> ReadResult:
        return cls(path=path, success=False, data=None,
                   error=FileReadError(path, cause=cause, status=status))

    def unwrap(self) -> str | bytes:
        """Return the payload, or raise the wrapped FileReadError."""
        if not self.success:
            raise self.error
        return self.data
