from __future__ import annotations

import json
import runpy
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from opencode_context.cli import app
from opencode_context.commands import init as init_cmd
from opencode_context.config import Asset

runner = CliRunner()


@pytest.mark.parametrize("args", [[], ["--help"], ["-h"], ["init", "--help"]])
def test_help_exits_zero(args, project: Path):
    result = runner.invoke(app, args)

    assert result.exit_code == 0
    assert "--force" in result.output
    assert "--global" in result.output
    assert list(project.iterdir()) == []


def test_unknown_command_exits_one(project: Path):
    result = runner.invoke(app, ["setup"])

    assert result.exit_code == 1
    assert "Unknown command: setup" in result.output
    assert list(project.iterdir()) == []


def test_flags_without_command_exit_one(project: Path):
    result = runner.invoke(app, ["--force"])

    assert result.exit_code == 1
    assert "No command given" in result.output


def test_init_installs_into_cwd(project: Path):
    result = runner.invoke(app, ["init"])

    assert result.exit_code == 0, result.output
    assert (project / ".opencode" / "skill" / "context-update" / "SKILL.md").is_file()
    assert (project / ".opencode" / "command" / "context-update.md").is_file()
    assert (project / "opencode.json").is_file()
    assert "Done!" in result.output


def test_flags_may_precede_command(project: Path):
    (project / "opencode.json").write_text("broken", encoding="utf-8")

    result = runner.invoke(app, ["-f", "init"])

    assert result.exit_code == 0, result.output
    config = json.loads((project / "opencode.json").read_text(encoding="utf-8"))
    assert config["$schema"] == "https://opencode.ai/config.json"


def test_init_prompts_on_existing_files(project: Path):
    runner.invoke(app, ["init"])

    result = runner.invoke(app, ["init"], input="n\nn\n")

    assert result.exit_code == 0, result.output
    assert "Overwrite?" in result.output
    assert "Nothing to do" in result.output


def test_global_init_uses_home_config_dir(project: Path, home_dir: Path):
    result = runner.invoke(app, ["init", "--global"])

    assert result.exit_code == 0, result.output
    global_dir = home_dir / ".config" / "opencode"
    assert (global_dir / ".opencode" / "command" / "context-update.md").is_file()
    assert not (global_dir / "opencode.json").exists()
    assert list(project.iterdir()) == []


def test_global_init_honours_config_dir_override(tmp_path: Path, project: Path, monkeypatch):
    override = tmp_path / "custom-opencode"
    monkeypatch.setenv("OPENCODE_CONFIG_DIR", str(override))

    result = runner.invoke(app, ["init", "-g"])

    assert result.exit_code == 0, result.output
    assert (override / ".opencode" / "skill" / "context-update" / "SKILL.md").is_file()


def test_global_init_without_home_fails_fast(project: Path, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)

    result = runner.invoke(app, ["init", "--global"])

    assert result.exit_code == 1
    assert "Cannot determine home directory" in result.output


def test_missing_asset_exits_one(project: Path, monkeypatch):
    monkeypatch.setattr(
        init_cmd,
        "ASSETS",
        (Asset(name="skill", source="missing.md", destination=("SKILL.md",)),),
    )

    result = runner.invoke(app, ["init"])

    assert result.exit_code == 1
    assert "Source file not found" in result.output


@pytest.mark.parametrize(
    "args, message",
    [
        (["init", "--bogus"], "No such option"),
        (["init", "extra"], "unexpected extra argument"),
    ],
)
def test_usage_errors_exit_one(args, message, project: Path):
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert message in result.output
    assert list(project.iterdir()) == []


def test_python_dash_m_runs_cli(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["opencode-context", "--help"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("opencode_context", run_name="__main__")

    assert excinfo.value.code == 0
    assert "--global" in capsys.readouterr().out
