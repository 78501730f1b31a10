"""
Value objects passed between the core and its collaborators.

Pydantic models give the notification payload a validated, serializable
shape the presentation layer can consume as-is.
"""

from enum import Enum
from typing import Dict, Any

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Notification severity understood by the toast layer."""
    INFO = "info"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """User-facing notification payload (title, description, severity)."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = ""
    severity: Severity = Severity.INFO

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json")


class PublishAttempt(BaseModel):
    """State of a single publish call. Never persisted."""
    title: str
    content: str
    is_signed_in: bool
    in_progress: bool = False


class PublishOutcome(str, Enum):
    """Terminal state of a publish attempt."""
    REJECTED = "rejected"
    COMPLETED = "completed"
    FAILED = "failed"


class ShareLink(BaseModel):
    """Shareable story URL plus the message copied to the clipboard."""
    model_config = ConfigDict(frozen=True)

    url: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump()
