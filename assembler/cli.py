from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from isa import to_listing, to_symbol_dump

from .codegen import Codegen
from .errors import AsmError
from .parser import parse_source

log = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def write_text(path: str, data: str):
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="hasm", description="Hack .asm -> .hack assembler")
    ap.add_argument("source", help="input .asm file")
    ap.add_argument("-o", "--output", help="write machine code to file (default: stdout)")
    ap.add_argument("--listing", help="write annotated listing to file")
    ap.add_argument("--symbols", help="write label/variable addresses to file")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)

    try:
        with open(args.source, encoding="utf-8") as f:
            src = f.read()
    except OSError as exc:
        print(f"error {args.source}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        prog = parse_source(src, args.source)
        cg = Codegen()
        words = cg.gen(prog)
    except AsmError as exc:
        print(f"error {exc}", file=sys.stderr)
        return 1

    code = "".join(w + "\n" for w in words)
    # сначала файлы, stdout последним: при ошибке записи машинный код не выводится
    try:
        if args.listing:
            write_text(args.listing, to_listing(words, (ins.text for ins in prog.instructions)))
        if args.symbols:
            write_text(args.symbols, to_symbol_dump(prog.symbols.labels(), prog.symbols.variables()))
        if args.output:
            write_text(args.output, code)
            log.info("wrote %d words to %s", len(words), args.output)
    except OSError as exc:
        print(f"error {exc.filename}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    if not args.output:
        sys.stdout.write(code)
    return 0
