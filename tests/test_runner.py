from __future__ import annotations

from pathlib import Path

import pytest

from tests.support.harness import MlInteger, run_program
from minilang.runner import main
from minilang.utils import log_level_from_env, parse_literal
from minilang.types import MlBoolean, MlDouble


def test_run_returns_value() -> None:
    assert run_program("let x = 3 in x + 4") == MlInteger(7)


def test_main_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["let x = 3 in x + 4"]) == 0
    assert capsys.readouterr().out.strip() == "7"


def test_main_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "prog.ml"
    script.write_text("let ok = true in ok or false\n", encoding="utf-8")

    assert main([str(script)]) == 0
    assert capsys.readouterr().out.strip() == "true"


def test_main_with_defines(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--define", "n=10", "--define=scale=0.5", "n * scale"]) == 0
    assert capsys.readouterr().out.strip() == "5.0"


def test_main_tree_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--tree", "1 + 2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["BinOp[ADD](", "  Int(1)", "  Int(2)", ")", "3"]


@pytest.mark.parametrize(
    "source, fragment",
    [
        pytest.param("5 / 0", "Error: Division by zero. (line 1)", id="runtime-error"),
        pytest.param("1 +", "Error: ", id="parse-error"),
        pytest.param("y + 1", "Error: Name 'y' not found (line 1)", id="unbound"),
    ],
)
def test_main_reports_errors(source: str, fragment: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([source]) == 1
    assert fragment in capsys.readouterr().err


def test_main_accepts_source_longer_than_a_file_name(capsys: pytest.CaptureFixture[str]) -> None:
    source = " + ".join(["1"] * 200)

    assert main([source]) == 0
    assert capsys.readouterr().out.strip() == "200"


def test_main_reports_integer_overflow(capsys: pytest.CaptureFixture[str]) -> None:
    big = "1" + "0" * 200

    assert main([f"{big} * {big}"]) == 1
    assert "Integer result out of range." in capsys.readouterr().err


def test_main_rejects_bad_define() -> None:
    with pytest.raises(SystemExit):
        main(["--define", "oops", "1"])


def test_main_rejects_extra_argument() -> None:
    with pytest.raises(SystemExit):
        main(["1", "2"])


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("3", MlInteger(3), id="int"),
        pytest.param(" 2.5 ", MlDouble(2.5), id="double"),
        pytest.param("true", MlBoolean(True), id="true"),
        pytest.param("false", MlBoolean(False), id="false"),
        pytest.param("abc", None, id="not-literal"),
    ],
)
def test_parse_literal(text: str, expected) -> None:
    assert parse_literal(text) == expected


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINILANG_LOG_LEVEL", "debug")
    assert log_level_from_env() == 10

    monkeypatch.setenv("MINILANG_LOG_LEVEL", "bogus")
    assert log_level_from_env(default=30) == 30

    monkeypatch.delenv("MINILANG_LOG_LEVEL")
    assert log_level_from_env(default=40) == 40
