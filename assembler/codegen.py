from __future__ import annotations

import logging
import re

from isa import COMP, DEST, JUMP, MAX_ADDRESS, a_word, c_word

from .errors import AddressOverflow, InvalidComp, InvalidDest, InvalidJump, MissingOperand
from .parser import Instruction, Program, parse_source
from .symbols import SymbolTable

log = logging.getLogger(__name__)

DECIMAL_RE = re.compile(r"[0-9]+")


class Codegen:
    """Second pass: encodes every instruction of a parsed program.

    Variables are allocated on first use, so the table attached to the
    program grows while the words are produced.
    """

    def __init__(self):
        self.words: list[str] = []
        self.symbols: SymbolTable | None = None
        self.path = "<source>"

    def gen(self, prog: Program) -> list[str]:
        self.words = []
        self.symbols = prog.symbols
        self.path = prog.path
        for ins in prog.instructions:
            if ins.is_a:
                self.words.append(self.gen_a(ins))
            else:
                self.words.append(self.gen_c(ins))
        log.info("second pass: %d words, %d variables", len(self.words), len(self.symbols.variables()))
        return self.words

    def gen_a(self, ins: Instruction) -> str:
        operand = ins.text[1:]
        if not operand:
            raise MissingOperand("missing address after '@'", ins.line, self.path)
        if DECIMAL_RE.fullmatch(operand):
            addr = int(operand)
            if addr > MAX_ADDRESS:
                raise AddressOverflow(f"address {addr} does not fit in 15 bits", ins.line, self.path)
            return a_word(addr)
        addr = self.symbols.resolve_or_allocate_variable(operand)
        # метка за концом ПЗУ или исчерпанная память переменных
        if addr > MAX_ADDRESS:
            raise AddressOverflow(f"symbol {operand!r} resolves to {addr}, beyond 15 bits", ins.line, self.path)
        return a_word(addr)

    def gen_c(self, ins: Instruction) -> str:
        dest_comp, _, jump = ins.text.partition(";")
        dest, eq, comp = dest_comp.partition("=")
        if not eq:
            dest, comp = "", dest_comp

        if comp not in COMP:
            raise InvalidComp(f"invalid comp value: {comp!r}", ins.line, self.path)
        if dest not in DEST:
            raise InvalidDest(f"invalid dest value: {dest!r}", ins.line, self.path)
        if jump not in JUMP:
            raise InvalidJump(f"invalid jump value: {jump!r}", ins.line, self.path)
        return c_word(comp, dest, jump)


def assemble(src: str, path: str = "<source>") -> list[str]:
    return Codegen().gen(parse_source(src, path))
