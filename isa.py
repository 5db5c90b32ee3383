from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

WORD_BITS = 16
ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1
# первый свободный адрес для переменных (R0..R15 заняты)
VARIABLE_BASE = 16

# comp -> a c1 c2 c3 c4 c5 c6
COMP: Mapping[str, str] = MappingProxyType(
    {
        "0": "0101010",
        "1": "0111111",
        "-1": "0111010",
        "D": "0001100",
        "A": "0110000",
        "M": "1110000",
        "!D": "0001101",
        "!A": "0110001",
        "!M": "1110001",
        "-D": "0001111",
        "-A": "0110011",
        "-M": "1110011",
        "D+1": "0011111",
        "A+1": "0110111",
        "M+1": "1110111",
        "D-1": "0001110",
        "A-1": "0110010",
        "M-1": "1110010",
        "D+A": "0000010",
        "D+M": "1000010",
        "D-A": "0010011",
        "D-M": "1010011",
        "A-D": "0000111",
        "M-D": "1000111",
        "D&A": "0000000",
        "D&M": "1000000",
        "D|A": "0010101",
        "D|M": "1010101",
    }
)

DEST: Mapping[str, str] = MappingProxyType(
    {
        "": "000",
        "M": "001",
        "D": "010",
        "MD": "011",
        "A": "100",
        "AM": "101",
        "AD": "110",
        "AMD": "111",
    }
)

JUMP: Mapping[str, str] = MappingProxyType(
    {
        "": "000",
        "JGT": "001",
        "JEQ": "010",
        "JGE": "011",
        "JLT": "100",
        "JNE": "101",
        "JLE": "110",
        "JMP": "111",
    }
)

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType(
    {
        "SP": 0,
        "LCL": 1,
        "ARG": 2,
        "THIS": 3,
        "THAT": 4,
        **{f"R{i}": i for i in range(16)},
        "SCREEN": 16384,
        "KBD": 24576,
    }
)


def a_word(address: int) -> str:
    """A-instruction: 0 + 15-bit address."""
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"address out of range: {address}")
    return "0" + format(address, f"0{ADDRESS_BITS}b")


def c_word(comp: str, dest: str = "", jump: str = "") -> str:
    """C-instruction: 111 + comp + dest + jump. Mnemonics must already be valid."""
    return "111" + COMP[comp] + DEST[dest] + JUMP[jump]


def to_listing(words: list[str], sources: Iterable[str]) -> str:
    lines: list[str] = []
    for addr, (word, text) in enumerate(zip(words, sources)):
        lines.append(f"{addr:5d} - {word} - {text}")
    return "\n".join(lines) + ("\n" if lines else "")


def to_symbol_dump(labels: Iterable[tuple[str, int]], variables: Iterable[tuple[str, int]]) -> str:
    lines = [f"{name} {addr}" for name, addr in labels]
    lines.extend(f"{name} {addr}" for name, addr in variables)
    return "\n".join(lines) + ("\n" if lines else "")
