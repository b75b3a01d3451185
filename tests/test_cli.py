import json
from pathlib import Path

import pytest

from edlpy.cli import EXIT_IO_ERROR, EXIT_LINT_ERRORS, EXIT_OK, main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_lint_reports_errors_with_one_based_positions(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "login.edl", "state idle\nevent User_Login {\n")

    exit_code = main(["lint", str(path)])

    out = capsys.readouterr().out
    assert exit_code == EXIT_LINT_ERRORS
    assert f"{path}:2:18: error: Missing closing bracket [missing-bracket]" in out
    assert f"{path}:2:7: error: Event names should be lowercase with underscores [invalid-event-name]" in out
    assert "2 issues found (2 errors, 0 warnings, 0 information)" in out


def test_lint_clean_file_exits_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "clean.edl", "state idle\n")

    assert main(["lint", str(path)]) == EXIT_OK
    assert "No issues found" in capsys.readouterr().out


def test_lint_warnings_do_not_fail(tmp_path: Path) -> None:
    path = _write(tmp_path, "idle.edl", "idle -> idle\n")

    assert main(["lint", str(path)]) == EXIT_OK


def test_lint_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "emit.edl", "emit(null)")

    main(["lint", "--format", "json", str(path)])

    payload = json.loads(capsys.readouterr().out)
    assert [entry["code"] for entry in payload[str(path)]] == ["missing-semicolon", "undefined-event"]
    assert payload[str(path)][1]["range"] == [0, 5, 0, 9]


def test_lint_disabled_reports_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bad.edl", "event Bad {")

    assert main(["lint", "--disable-linting", str(path)]) == EXIT_OK
    assert "No issues found" in capsys.readouterr().out


def test_lint_missing_file_exits_with_io_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["lint", str(tmp_path / "missing.edl")])

    assert exit_code == EXIT_IO_ERROR
    assert "cannot read file" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == EXIT_OK
    assert "usage: edlpy" in capsys.readouterr().out
