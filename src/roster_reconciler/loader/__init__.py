"""
Registry file loading for the CLI layer.

The engine itself never touches the filesystem; callers load rows here and
turn them into typed records with ``roster_reconciler.records``.
"""

from __future__ import annotations

from .file_loader import load_registry_file

__all__ = ["load_registry_file"]
