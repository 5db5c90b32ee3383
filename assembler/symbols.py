from __future__ import annotations

import logging

from isa import PREDEFINED_SYMBOLS, VARIABLE_BASE

from .errors import DuplicateLabel

log = logging.getLogger(__name__)


class SymbolTable:
    """Символы -> адреса: предопределённые, метки и переменные.

    Привязка не меняется до конца трансляции; курсор переменных только растёт.
    """

    def __init__(self):
        self.addrs: dict[str, int] = dict(PREDEFINED_SYMBOLS)
        self.next_var = VARIABLE_BASE
        self._labels: list[str] = []
        self._vars: list[str] = []

    def __contains__(self, name: str) -> bool:
        return name in self.addrs

    def __len__(self) -> int:
        return len(self.addrs)

    def lookup(self, name: str) -> int | None:
        return self.addrs.get(name)

    def define_label(self, name: str, address: int):
        if name in self.addrs:
            raise DuplicateLabel(f'jump label "{name}" previously declared')
        self.addrs[name] = address
        self._labels.append(name)
        log.debug("label %s -> %d", name, address)

    def resolve_or_allocate_variable(self, name: str) -> int:
        addr = self.addrs.get(name)
        if addr is not None:
            return addr
        addr = self.next_var
        self.addrs[name] = addr
        self._vars.append(name)
        self.next_var += 1
        log.debug("variable %s -> %d", name, addr)
        return addr

    def labels(self) -> list[tuple[str, int]]:
        return [(name, self.addrs[name]) for name in self._labels]

    def variables(self) -> list[tuple[str, int]]:
        return [(name, self.addrs[name]) for name in self._vars]
