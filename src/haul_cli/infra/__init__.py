"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system and the
Node.js toolchain.

Rules
-----
* No imports from ``cli`` or ``commands``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from haul_cli.infra.node_detector import NodeStatus, detect_node, require_node
from haul_cli.infra.webpack_runner import WebpackRunner

__all__: list[str] = [
    "NodeStatus",
    "WebpackRunner",
    "detect_node",
    "require_node",
]
