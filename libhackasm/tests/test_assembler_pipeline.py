import os
from pathlib import Path

import pytest

from libhackasm import (
    AssemblerConfig,
    HackAssemblerError,
    assemble_file,
    assemble_lines,
    write_hack_file,
)
from libhackasm.assembler import infer_output_filepath
from libhackasm.lexer import strip_source
from libhackasm.lexer.errors import MalformedIdentifierError
from libhackasm.symbols.errors import DuplicateLabelError

COUNTER_PROGRAM = [
    "@counter",
    "M=0",
    "(LOOP)",
    "@counter",
    "M=M+1",
    "@LOOP",
    "0;JMP",
]

COUNTER_PROGRAM_BINARY = [
    "0000000000010000",
    "1110101010001000",
    "0000000000010000",
    "1111110111001000",
    "0000000000000010",
    "1110101010000111",
]

# Computes R0 = 2 + 3
ADD_PROGRAM = """// This file is part of www.nand2tetris.org
// Computes R0 = 2 + 3  (R0 refers to RAM[0])

@2
D=A
@3
D=D+A
@0
M=D
"""

MAX_PROGRAM = """   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("@5", "0000000000000101"),
        ("@SCREEN", "0100000000000000"),
        ("D=A", "1110110000010000"),
        ("M=D+1", "1110011111001000"),
        ("0;JMP", "1110101010000111"),
    ],
)
def test_single_instruction(line: str, expected: str) -> None:
    assert assemble_lines([line]) == [expected]


def test_counter_program() -> None:
    assert assemble_lines(COUNTER_PROGRAM) == COUNTER_PROGRAM_BINARY


def test_add_program() -> None:
    assert assemble_lines(ADD_PROGRAM.splitlines()) == [
        "0000000000000010",
        "1110110000010000",
        "0000000000000011",
        "1110000010010000",
        "0000000000000000",
        "1110001100001000",
    ]


def test_max_program() -> None:
    assert assemble_lines(MAX_PROGRAM.splitlines()) == [
        "0000000000000000",
        "1111110000010000",
        "0000000000000001",
        "1111010011010000",
        "0000000000001010",
        "1110001100000001",
        "0000000000000001",
        "1111110000010000",
        "0000000000001100",
        "1110101010000111",
        "0000000000000000",
        "1111110000010000",
        "0000000000000010",
        "1110001100001000",
        "0000000000001110",
        "1110101010000111",
    ]


@pytest.mark.parametrize(
    "source",
    [COUNTER_PROGRAM, ADD_PROGRAM.splitlines(), MAX_PROGRAM.splitlines()],
)
def test_output_shape(source: list[str]) -> None:
    stripped = [line.text for line in strip_source(source)]
    instructions = [text for text in stripped if not text.startswith("(")]
    encoded = assemble_lines(source)

    assert len(encoded) == len(instructions)
    for text, binary in zip(instructions, encoded, strict=True):
        assert len(binary) == 16
        assert set(binary) <= {"0", "1"}
        if text.startswith("@"):
            assert binary[0] == "0"
        else:
            assert binary.startswith("111")


def test_whitespace_and_comments_do_not_change_output() -> None:
    noisy = [
        "// counter",
        "  @ counter   // variable",
        "M = 0",
        "",
        "\t( LOOP )",
        "@counter",
        "   M=M + 1 // increment",
        "@LOOP",
        "0 ; JMP",
        "// end",
    ]
    assert assemble_lines(noisy) == COUNTER_PROGRAM_BINARY


def test_label_relocation_among_blank_and_comment_lines() -> None:
    before = ["@1", "", "(TARGET)", "// comment", "D=A", "@TARGET"]
    after = ["@1", "", "// comment", "(TARGET)", "D=A", "@TARGET"]
    assert assemble_lines(before) == assemble_lines(after)
    assert assemble_lines(before)[-1] == "0000000000000001"


def test_variables_never_collide_with_labels() -> None:
    source = ["@a", "(L1)", "@b", "@L1", "(L2)", "@c", "@L2"]
    encoded = assemble_lines(source)
    assert [int(b, 2) for b in encoded] == [16, 17, 1, 18, 3]


def test_first_error_halts_translation() -> None:
    with pytest.raises(DuplicateLabelError) as e:
        assemble_lines(["(A1)", "@1", "(A1)", "AA=D"])
    assert e.value.at.line_number == 2


def test_error_location_points_to_raw_source_line() -> None:
    filepath = Path("Broken.asm")
    with pytest.raises(HackAssemblerError) as e:
        assemble_lines(["// comment", "", "@1", "@9lives"], filepath=filepath)
    assert e.value.kind == "syntax"
    assert e.value.at.line_number == 3
    assert e.value.token == "9lives"
    assert "'Broken.asm:4'" in repr(e.value)


def test_label_identifier_errors() -> None:
    with pytest.raises(MalformedIdentifierError):
        assemble_lines(["(9LIVES)"])


def test_custom_config() -> None:
    config = AssemblerConfig(variables_start_address=100, variables_max_address=200)
    assert assemble_lines(["@x", "@y"], config=config) == [
        "0000000001100100",
        "0000000001100101",
    ]


def test_independent_translations_do_not_share_symbols() -> None:
    assert assemble_lines(["(X)", "@X"]) == ["0000000000000000"]
    assert assemble_lines(["@X"]) == ["0000000000010000"]


def test_assemble_and_write_file(tmp_path: Path) -> None:
    source = tmp_path / "Counter.asm"
    source.write_text("\r\n".join(COUNTER_PROGRAM) + "\r\n", encoding="utf-8")

    encoded = assemble_file(source)
    assert encoded == COUNTER_PROGRAM_BINARY

    output = infer_output_filepath(source)
    assert output == tmp_path / "Counter.hack"
    write_hack_file(output, encoded)
    assert output.read_bytes() == "".join(
        f"{line}{os.linesep}" for line in COUNTER_PROGRAM_BINARY
    ).encode("ascii")


def test_assemble_file_error_location(tmp_path: Path) -> None:
    source = tmp_path / "Bad.asm"
    source.write_text("@1\nD=X\n", encoding="utf-8")
    with pytest.raises(HackAssemblerError) as e:
        assemble_file(source)
    assert e.value.kind == "lookup"
    assert e.value.at.filepath == source
    assert e.value.at.line_number == 1


def test_huge_literals() -> None:
    assert assemble_lines(["@" + "0" * 5000 + "5"]) == ["0000000000000101"]
    with pytest.raises(HackAssemblerError) as e:
        assemble_lines(["@1", "@" + "9" * 5000])
    assert e.value.kind == "range"
    assert e.value.at.line_number == 1
