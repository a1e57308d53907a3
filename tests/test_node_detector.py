"""Tests for Node.js detection (infra/node_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from haul_cli.exceptions import EnvironmentError, NodeNotFoundError
from haul_cli.infra.node_detector import (
    NodeStatus,
    _platform_install_commands,
    detect_node,
    require_node,
)


class TestDetectNode:
    @patch("haul_cli.infra.node_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/bin/node"
        status = detect_node()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()

    @patch("haul_cli.infra.node_detector.shutil.which")
    def test_not_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        status = detect_node()

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0


class TestRequireNode:
    @patch("haul_cli.infra.node_detector.shutil.which")
    def test_found_returns_path(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/bin/node"
        assert isinstance(require_node(), Path)

    @patch("haul_cli.infra.node_detector.shutil.which")
    def test_missing_raises_with_hint(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        with pytest.raises(NodeNotFoundError, match="not installed") as exc_info:
            require_node()
        assert exc_info.value.hint is not None
        assert "Install Node.js" in exc_info.value.hint

    def test_is_environment_error(self) -> None:
        assert issubclass(NodeNotFoundError, EnvironmentError)


class TestPlatformInstallCommands:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Windows", "winget install OpenJS.NodeJS.LTS"),
            ("Linux", "sudo apt install nodejs"),
            ("Darwin", "brew install node"),
        ],
    )
    def test_known_platforms(self, system: str, expected: str) -> None:
        with patch("haul_cli.infra.node_detector.platform.system", return_value=system):
            assert expected in _platform_install_commands()

    @patch("haul_cli.infra.node_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_fallback(self, _mock: MagicMock) -> None:
        commands = _platform_install_commands()
        assert len(commands) == 1
        assert "nodejs.org" in commands[0]


class TestNodeStatus:
    def test_frozen(self) -> None:
        status = NodeStatus(found=False, path=None, install_commands=())
        with pytest.raises(AttributeError):
            status.found = True  # type: ignore[misc]
