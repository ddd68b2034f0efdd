# SPDX-License-Identifier: MIT
"""Core brew machinery: options, errors and the build orchestrator."""
