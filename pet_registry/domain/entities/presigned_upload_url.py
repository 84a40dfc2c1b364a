"""
PresignedUploadUrl - A time-limited URL the client PUTs an avatar to.

Created per upload request and handed back to the caller. Never persisted.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PresignedUploadUrl:
    upload_url: str
    key: str
    expires_at: datetime
