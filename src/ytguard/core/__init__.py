"""Core utilities package.

Pure helpers shared across ytguard, currently the subprocess wrapper used
for every external tool invocation.
"""

from ytguard.core.subprocess_utils import run_command, run_passthrough

__all__ = [
    "run_command",
    "run_passthrough",
]
