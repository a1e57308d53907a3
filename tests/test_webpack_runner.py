"""Tests for the webpack runner subprocess wrapper (infra/webpack_runner.py).

``asyncio.create_subprocess_exec`` and ``node`` detection are mocked;
no process is ever spawned.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from haul_cli.exceptions import BundlerFailedError
from haul_cli.infra.webpack_runner import DEFAULT_RUNNER_SCRIPT, WebpackRunner

NODE = Path("/usr/bin/node")


def _project(tmp_path: Path) -> Path:
    script = tmp_path / DEFAULT_RUNNER_SCRIPT
    script.parent.mkdir(parents=True)
    script.write_text("// runner", encoding="utf-8")
    return tmp_path


def _process(returncode: int) -> MagicMock:
    process = MagicMock()
    process.wait = AsyncMock(return_value=returncode)
    return process


class TestScriptResolution:
    def test_default_script_relative_to_cwd(self, tmp_path: Path) -> None:
        runner = WebpackRunner(cwd=tmp_path)
        assert runner.script == tmp_path / DEFAULT_RUNNER_SCRIPT

    def test_absolute_script_kept(self, tmp_path: Path) -> None:
        script = tmp_path / "runner.js"
        assert WebpackRunner(cwd=Path("/elsewhere"), script=script).script == script

    @patch("haul_cli.infra.webpack_runner.require_node", return_value=NODE)
    def test_command_line(self, _mock_node: MagicMock, tmp_path: Path) -> None:
        runner = WebpackRunner(cwd=tmp_path)
        assert runner.command(["--mode", "start"]) == [
            str(NODE),
            str(tmp_path / DEFAULT_RUNNER_SCRIPT),
            "--mode",
            "start",
        ]


class TestRun:
    @patch("haul_cli.infra.webpack_runner.require_node", return_value=NODE)
    @patch("haul_cli.infra.webpack_runner.asyncio.create_subprocess_exec")
    def test_success(
        self, mock_exec: AsyncMock, _mock_node: MagicMock, tmp_path: Path,
    ) -> None:
        project = _project(tmp_path)
        mock_exec.return_value = _process(0)

        asyncio.run(WebpackRunner(cwd=project).run(["--mode", "bundle"]))

        args, kwargs = mock_exec.call_args
        assert args[0] == str(NODE)
        assert args[-2:] == ("--mode", "bundle")
        assert kwargs["cwd"] == str(project)

    @patch("haul_cli.infra.webpack_runner.require_node", return_value=NODE)
    @patch("haul_cli.infra.webpack_runner.asyncio.create_subprocess_exec")
    def test_non_zero_exit_raises(
        self, mock_exec: AsyncMock, _mock_node: MagicMock, tmp_path: Path,
    ) -> None:
        mock_exec.return_value = _process(3)

        with pytest.raises(BundlerFailedError, match="status 3"):
            asyncio.run(WebpackRunner(cwd=_project(tmp_path)).run([]))

    @patch("haul_cli.infra.webpack_runner.asyncio.create_subprocess_exec")
    def test_missing_script_raises_before_spawning(
        self, mock_exec: AsyncMock, tmp_path: Path,
    ) -> None:
        with pytest.raises(BundlerFailedError, match="not found") as exc_info:
            asyncio.run(WebpackRunner(cwd=tmp_path).run([]))
        assert exc_info.value.hint is not None
        mock_exec.assert_not_called()
