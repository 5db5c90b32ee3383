from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import DuplicateLabel, MalformedLabel
from .lexer import SourceLine, scan
from .symbols import SymbolTable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Instruction:
    text: str
    line: int

    @property
    def is_a(self) -> bool:
        return self.text.startswith("@")


# результат первого прохода: метки уже в таблице, переменных ещё нет
@dataclass
class Program:
    instructions: list[Instruction]
    symbols: SymbolTable
    path: str = "<source>"


class Parser:
    def __init__(self, lines: Iterator[SourceLine], path: str = "<source>"):
        self.lines = list(lines)
        self.path = path
        self.symbols = SymbolTable()
        self.instructions: list[Instruction] = []

    def parse(self) -> Program:
        for ln in self.lines:
            if ln.text.startswith("("):
                self.parse_label(ln)
                continue
            self.instructions.append(Instruction(ln.text, ln.line))
        log.info("first pass: %d instructions, %d labels", len(self.instructions), len(self.symbols.labels()))
        return Program(self.instructions, self.symbols, self.path)

    def parse_label(self, ln: SourceLine):
        text = ln.text
        if len(text) < 3 or not text.endswith(")"):
            raise MalformedLabel(f"invalid label specifier {text!r}", ln.line, self.path)
        name = text[1:-1]
        try:
            # метка указывает на следующую настоящую инструкцию
            self.symbols.define_label(name, len(self.instructions))
        except DuplicateLabel as exc:
            exc.line, exc.path = ln.line, self.path
            raise


def parse_source(src: str, path: str = "<source>") -> Program:
    return Parser(scan(src), path).parse()
