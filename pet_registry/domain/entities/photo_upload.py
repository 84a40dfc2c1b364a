"""
PhotoUpload - Photo bytes attached to a registration request.

Held in memory only for the duration of the request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoUpload:
    file_name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
