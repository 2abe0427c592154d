"""Fatal error types for provdedupe.

Every exception here aborts a run before any artifact is written. Per-record
data problems are never raised; they fall back to documented defaults.
"""

__all__ = [
    "PipelineError",
    "InputNotFoundError",
    "MissingColumnsError",
    "ArtifactValidationError",
]


class PipelineError(Exception):
    """Base class for run-aborting pipeline failures."""


class InputNotFoundError(PipelineError):
    """Raised when the input table is missing or cannot be read."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MissingColumnsError(PipelineError):
    """Raised when the header lacks one or more required columns.

    Attributes
    ----------
    missing : list[str]
        Missing column names, in required-column order.
    """

    def __init__(self, missing: list[str]) -> None:
        super().__init__("Missing columns: " + ", ".join(missing))
        self.missing = list(missing)


class ArtifactValidationError(PipelineError):
    """Raised when an output artifact does not match its JSON Schema."""

    def __init__(self, message: str, artifact: str | None = None) -> None:
        super().__init__(message)
        self.artifact = artifact
