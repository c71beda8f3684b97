"""Custom exceptions for the deepmatch engine."""


class DeepMatchError(Exception):
    """Base exception for deepmatch errors."""
    pass


class ConfigurationError(DeepMatchError):
    """Raised when an ignore or business-key tree is malformed or conflicting."""
    def __init__(self, message: str, path: str = None):
        super().__init__(f"{message} (at {path})" if path else message)
        self.message = message
        self.path = path


class UnsupportedComparisonError(DeepMatchError):
    """Raised when arrays of arrays are compared under a business key."""
    def __init__(self, path: str):
        super().__init__(f"Nested arrays cannot be matched by business key at path: {path}")
        self.path = path


class DepthExceededError(DeepMatchError):
    """Raised when maximum recursion depth is exceeded."""
    def __init__(self, depth: int, path: str):
        super().__init__(f"Maximum depth ({depth}) exceeded at path: {path}")
        self.depth = depth
        self.path = path


class LoaderError(DeepMatchError):
    """Raised when a document or configuration file cannot be loaded."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load '{path}': {reason}")
        self.path = path
        self.reason = reason
