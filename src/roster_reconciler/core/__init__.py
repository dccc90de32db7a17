"""
Orchestration layer: settings, run context, exceptions and the pipeline.

``Pipeline`` lives in ``roster_reconciler.core.pipeline`` and is imported from
there directly.
"""

from roster_reconciler.core.exceptions import (
    ConfigurationError,
    ReconcileError,
    ReconcileExecutionError,
    RecordValidationError,
    RegistryLoadError,
)

__all__ = [
    "ConfigurationError",
    "ReconcileError",
    "ReconcileExecutionError",
    "RecordValidationError",
    "RegistryLoadError",
]
