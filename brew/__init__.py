# SPDX-License-Identifier: MIT
"""
Brew: the build tool for native LOS projects.

Brew reads a ``brewfile`` manifest, compiles the project's ``src`` tree
incrementally with the LOS cross toolchain, links an executable or static
library, installs it into a staged filesystem root, and recurses into
subprojects for group manifests.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export commonly used classes for convenient imports
from brew.core.options import Command, Options  # noqa: E402
from brew.core.orchestrator import Orchestrator  # noqa: E402
from brew.manifest import Manifest, load_manifest, parse_manifest  # noqa: E402

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Options
    "Command",
    "Options",
    # Manifest
    "Manifest",
    "load_manifest",
    "parse_manifest",
    # Execution
    "Orchestrator",
]
