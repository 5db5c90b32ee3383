import pytest

from assembler.errors import DuplicateLabel, MalformedLabel
from assembler.parser import Instruction, parse_source


def test_labels_do_not_occupy_slots():
    prog = parse_source("@LOOP\n0;JMP\n(LOOP)\n@1\n", "loop.asm")
    assert prog.instructions == [
        Instruction("@LOOP", 0),
        Instruction("0;JMP", 1),
        Instruction("@1", 3),
    ]
    assert prog.symbols.lookup("LOOP") == 2
    assert prog.path == "loop.asm"


def test_consecutive_labels_share_address():
    prog = parse_source("(A1)\n(B1)\nD=A\n(END)\n")
    assert prog.symbols.lookup("A1") == 0
    assert prog.symbols.lookup("B1") == 0
    # метка в конце файла указывает за последнюю инструкцию
    assert prog.symbols.lookup("END") == 1


def test_no_variables_after_first_pass():
    prog = parse_source("@i\nM=1\n")
    assert prog.symbols.variables() == []
    assert prog.symbols.lookup("i") is None


def test_instruction_kind():
    assert Instruction("@5", 0).is_a
    assert not Instruction("D=A", 0).is_a


@pytest.mark.parametrize("label", ["(", "()", "(LOOP", "(LOOP)x"])
def test_malformed_label(label):
    with pytest.raises(MalformedLabel) as ei:
        parse_source(f"@1\n{label}\n", "bad.asm")
    assert ei.value.line == 1
    assert ei.value.path == "bad.asm"


def test_duplicate_label_reports_second_declaration():
    src = "(LOOP)\n@1\n// again\n(LOOP)\n"
    with pytest.raises(DuplicateLabel) as ei:
        parse_source(src, "dup.asm")
    assert ei.value.line == 3
    assert str(ei.value) == 'dup.asm:3: jump label "LOOP" previously declared'
