"""Subprocess smoke tests for the CLI entrypoint."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path


PROJECT_ROOT = os.path.join(os.path.dirname(__file__), "..", "..")


def _run(*args: str, cwd: str = PROJECT_ROOT) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    src_dir = os.path.abspath(os.path.join(PROJECT_ROOT, "src"))
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src_dir, env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "explot", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        env=env,
    )


def test_cli_eval_smoke() -> None:
    """Ensure eval runs via python -m explot."""
    result = _run("eval", "2*(x+1)", "3")

    assert result.returncode == 0
    assert result.stdout.strip() == "8.0"


def test_cli_sample_json_smoke() -> None:
    """Ensure sample emits strict JSON."""
    result = _run("sample", "x^2", "--start", "0", "--stop", "2", "--count", "3", "--out", "json")

    assert result.returncode == 0
    payload = json.loads(result.stdout)
    assert [item["y"] for item in payload["samples"]] == [0.0, 1.0, 4.0]


def test_cli_config_file_smoke(tmp_path: Path) -> None:
    """Defaults from .explot.json in the working directory apply."""
    config_dir = str(tmp_path)
    with open(os.path.join(config_dir, ".explot.json"), "w", encoding="utf-8") as handle:
        json.dump({"defaults": {"--out": "csv", "--count": 2, "--start": 0, "--stop": 1}}, handle)

    result = _run("sample", "x", cwd=config_dir)

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["x,value", "0,0", "1,1"]


def test_cli_malformed_config_smoke(tmp_path: Path) -> None:
    """A malformed config file fails before any command runs."""
    config_dir = str(tmp_path)
    with open(os.path.join(config_dir, ".explot.json"), "w", encoding="utf-8") as handle:
        handle.write("{")

    result = _run("eval", "x", "1", cwd=config_dir)

    assert result.returncode != 0
    assert "Malformed config" in result.stderr


def test_cli_invalid_expression_smoke() -> None:
    """Parse errors exit with a usage error."""
    result = _run("eval", "2*", "1")

    assert result.returncode == 2
    assert "Invalid expression" in result.stderr
