class MfeMapError(RuntimeError):
    """Base error for the mapping pipeline."""


class ArtifactReadError(MfeMapError):
    """Raised when an upstream artifact is missing or cannot be parsed."""


class CaptureError(MfeMapError):
    """Raised when the browser could not produce a page snapshot."""
