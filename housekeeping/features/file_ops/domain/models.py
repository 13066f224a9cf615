from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from housekeeping.core.common.enums import ErrorKind, FileOperation
from .errors import FileOpError

@dataclass(frozen=True)
class OperationResult:
    """
    Tagged outcome of a single file operation.
    Either ok, or exactly one error kind plus the offending path.
    """
    operation: FileOperation
    target: Optional[Path]
    ok: bool = True
    error_kind: Optional[ErrorKind] = None
    path: Optional[Path] = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.ok and self.error_kind is not None:
            raise ValueError("A successful result cannot carry an error kind.")
        if not self.ok and self.error_kind is None:
            raise ValueError("A failed result must carry an error kind.")

    @classmethod
    def success(cls, operation: FileOperation, target: Optional[Path]) -> "OperationResult":
        return cls(operation=operation, target=target)

    @classmethod
    def failure(cls, operation: FileOperation, target: Optional[Path], error: FileOpError) -> "OperationResult":
        return cls(
            operation=operation,
            target=target,
            ok=False,
            error_kind=error.kind,
            path=error.path,
            message=str(error)
        )
