from __future__ import annotations

import json
from pathlib import Path

import pytest

import curriculum_audit.__main__ as module_main
from curriculum_audit import cli
from curriculum_audit.config import SAMPLE_COURSES_PATH, SAMPLE_CURRICULUM_PATH


def test_run_defaults_to_sample_documents(capsys) -> None:
    assert cli.run([]) == 0
    out = capsys.readouterr().out
    assert "B.S. COMPUTER SCIENCE" in out
    assert "Sample Student" in out


def test_run_with_explicit_paths_and_move(capsys) -> None:
    code = cli.run([str(SAMPLE_CURRICULUM_PATH), str(SAMPLE_COURSES_PATH), "--move", "MGMT 1100=Unapplied Courses"])
    assert code == 0
    assert "Moved MGMT 1100 to Unapplied Courses" in capsys.readouterr().out


def test_missing_document_exits_with_error(capsys, tmp_path: Path) -> None:
    assert cli.run([str(tmp_path / "missing.json")]) == 2
    assert "Error:" in capsys.readouterr().out


def test_malformed_document_exits_with_error(capsys, tmp_path: Path) -> None:
    courses = tmp_path / "courses.json"
    courses.write_text(json.dumps({"courses": [{"code": "CSCI 110", "credits": 4}]}), encoding="utf-8")

    assert cli.run([str(SAMPLE_CURRICULUM_PATH), str(courses)]) == 2
    assert "Malformed course number" in capsys.readouterr().out


def test_move_argument_must_name_a_set() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--move", "MGMT 1100"])


def test_parse_move() -> None:
    assert cli._parse_move(" PHIL 2110 = HASS ") == ("PHIL 2110", "HASS")


def test_no_autopopulate_flag() -> None:
    args = cli.build_parser().parse_args(["--no-autopopulate", "-v"])
    assert args.autopopulate is False
    assert args.verbose is True
    assert args.move == []


def test_main_exits_with_run_status(monkeypatch) -> None:
    monkeypatch.setattr(cli, "run", lambda argv=None: 0)
    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 0


def test_module_entrypoint_uses_cli_main() -> None:
    assert module_main.main is cli.main
