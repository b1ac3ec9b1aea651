"""
Errors raised by the capture and snapshot layers around the converter.
"""

from typing import Optional


class Dom2FigmaError(Exception):
    """Base class for errors raised outside the converter core."""


class CaptureError(Dom2FigmaError):
    """The browser could not produce a snapshot of the requested element."""

    def __init__(self, stage: str, message: str, target: Optional[str] = None):
        self.stage = stage
        self.message = message
        self.target = target
        where = f" ({target})" if target else ""
        super().__init__(f"Capture failed at {stage}{where}: {message}")


class SnapshotError(Dom2FigmaError):
    """A stored snapshot file is missing or does not have the expected shape."""
