from __future__ import annotations

from .records import facility_to_dict, technician_to_dict

__all__ = ["facility_to_dict", "technician_to_dict"]
