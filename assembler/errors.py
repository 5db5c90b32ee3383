from __future__ import annotations


class AsmError(Exception):
    """Ошибка трансляции с привязкой к файлу и строке (нумерация с 0)."""

    def __init__(self, message: str, line: int | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.path = path

    def __str__(self) -> str:
        where = self.path or "<source>"
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"{where}: {self.message}"


class MalformedLabel(AsmError):
    pass


class DuplicateLabel(AsmError):
    pass


class InvalidComp(AsmError):
    pass


class InvalidDest(AsmError):
    pass


class InvalidJump(AsmError):
    pass


class AddressOverflow(AsmError):
    pass


class MissingOperand(AsmError):
    pass
