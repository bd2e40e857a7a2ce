from pathlib import Path

import pytest

from hackasm.cli.main import cli_entry_point
from libhackasm.lexer.errors import MalformedDestinationError

COUNTER_PROGRAM = """// Increments counter forever
@counter
M=0
(LOOP)
    @counter
    M=M+1 // increment
    @LOOP
    0;JMP
"""


def _run(*argv: str) -> int | str | None:
    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hackasm", argv=list(argv))
    return e.value.code


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "Counter.asm"
    path.write_text(COUNTER_PROGRAM, encoding="utf-8")
    return path


def test_assemble_writes_hack_file_next_to_source(source: Path) -> None:
    assert _run(str(source)) == 0
    output = source.with_suffix(".hack")
    assert output.read_text(encoding="ascii").splitlines() == [
        "0000000000010000",
        "1110101010001000",
        "0000000000010000",
        "1111110111001000",
        "0000000000000010",
        "1110101010000111",
    ]


def test_assemble_explicit_output(source: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "program.bin"
    output.parent.mkdir()
    assert _run(str(source), "-o", str(output)) == 0
    assert len(output.read_text(encoding="ascii").splitlines()) == 6
    assert not source.with_suffix(".hack").exists()


def test_verbose_messages_go_to_stderr(
    source: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(str(source), "--verbose") == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"[INFO] Reading file: {source}" in captured.err
    assert "[INFO] Symbol resolution took" in captured.err
    assert "[INFO] Resolved 6 instructions, 1 variables." in captured.err
    assert "Translation complete" in captured.err


def test_quiet_by_default(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(str(source)) == 0
    assert capsys.readouterr().err == ""


def test_source_must_end_with_asm(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "Counter.txt"
    path.write_text("@1\n", encoding="utf-8")
    assert _run(str(path)) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_missing_source_file(tmp_path: Path) -> None:
    assert _run(str(tmp_path / "Missing.asm")) == 1


def test_missing_argument() -> None:
    assert _run() == 1


def test_assembler_error_is_reported_without_output(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "Bad.asm"
    path.write_text("@1\nAA=D\n", encoding="utf-8")
    assert _run(str(path)) == 1
    err = capsys.readouterr().err
    assert "'Bad.asm:2'" in err
    assert "[malformed-destination-error]" in err
    assert not path.with_suffix(".hack").exists()


def test_unwrapped_errors_are_raised(tmp_path: Path) -> None:
    path = tmp_path / "Bad.asm"
    path.write_text("AA=D\n", encoding="utf-8")
    with pytest.raises(MalformedDestinationError):
        cli_entry_point(prog="hackasm", argv=[str(path), "--debug-unwrap-errors"])


def test_output_io_failure(source: Path, tmp_path: Path) -> None:
    output = tmp_path / "missing-directory" / "Counter.hack"
    assert _run(str(source), "-o", str(output)) == 1


def test_preprocess_only_goal(
    source: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(str(source), "-E") == 0
    assert capsys.readouterr().out.splitlines() == [
        "@counter",
        "M=0",
        "(LOOP)",
        "@counter",
        "M=M+1",
        "@LOOP",
        "0;JMP",
    ]
    assert not source.with_suffix(".hack").exists()


def test_symbols_goal(source: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(str(source), "--symbols") == 0
    out = capsys.readouterr().out.splitlines()
    assert "    2 LOOP (label)" in out
    assert "   16 counter (variable)" in out
    assert "16384 SCREEN (predefined)" in out


def test_goals_are_mutually_exclusive(source: Path) -> None:
    assert _run(str(source), "-E", "--symbols") == 1


def test_version_goal(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run("--version") == 0
    assert "[Hack assembler toolchain]" in capsys.readouterr().out


def test_huge_literal_is_reported_as_range_error(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "Huge.asm"
    path.write_text("@" + "9" * 5000 + "\n", encoding="utf-8")
    assert _run(str(path)) == 1
    assert "[literal-out-of-range-error]" in capsys.readouterr().err
    assert not path.with_suffix(".hack").exists()
