from __future__ import annotations

from .facilities import mount_facilities_api
from .technicians import mount_technicians_api

__all__ = ["mount_facilities_api", "mount_technicians_api"]
