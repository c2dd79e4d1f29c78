# util/errors.py
from fastapi import HTTPException, status


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class StoreError(Exception):
    """Base for every failure raised by the key-value store."""


class NotFoundError(StoreError):
    def __init__(self, key: bytes) -> None:
        super().__init__(f"key not found: {key!r}")
        self.key = key


class StoreIOError(StoreError):
    def __init__(self, op: str, key: bytes | None = None) -> None:
        where = f" key={key!r}" if key is not None else ""
        super().__init__(f"store {op} failed{where}")
        self.op = op
        self.key = key


class StoreClosedError(StoreError):
    def __init__(self) -> None:
        super().__init__("store is closed")


class SerializationError(Exception):
    def __init__(self, key: bytes, reason: str) -> None:
        super().__init__(f"cannot decode record {key!r}: {reason}")
        self.key = key


class CommandError(Exception):
    """Raised by a command when its arguments or its own logic fail."""


class CommandExecutionError(Exception):
    def __init__(self, command_name: str, cause: Exception) -> None:
        super().__init__(f"Error processing command {command_name}: {cause}")
        self.command_name = command_name
        self.cause = cause


class HistoryAppendError(Exception):
    def __init__(self, command: str, cause: Exception) -> None:
        super().__init__(f"cannot record history for {command}: {cause}")
        self.command = command
        self.cause = cause
