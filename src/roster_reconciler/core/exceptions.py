class ReconcileError(Exception):
    """Base exception for reconciler failures outside the pure engine."""


class ConfigurationError(ReconcileError):
    """Raised when the reconciliation section of the config is malformed."""


class RecordValidationError(ReconcileError):
    """Raised when a source row cannot be turned into a typed record."""


class RegistryLoadError(ReconcileError):
    """Raised when a registry file cannot be read or has the wrong shape."""


class ReconcileExecutionError(ReconcileError):
    """Raised when a pipeline run fails."""
