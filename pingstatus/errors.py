from pathlib import Path
from typing import Any, Dict, Optional


class PingStatusError(Exception):
    """Base class for errors that end a run."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class StatusWriteError(PingStatusError):
    """Raised when the status document cannot be written."""

    def __init__(self, path: Path, reason: str):
        message = f"Cannot write status document to {path}: {reason}"
        super().__init__(message, {"path": str(path)})
