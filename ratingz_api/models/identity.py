from __future__ import annotations
from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """Pseudo-identity used as the uniqueness key of a submission."""

    key: str
    kind: str  # "user" | "device"
    user_id: Optional[str] = None
    device_id: Optional[str] = None
    ip_address: Optional[str] = None
    network_fingerprint: Optional[str] = None

    def as_fields(self) -> dict:
        """Fields stored next to a rating/reaction row."""
        return {
            "identity_key": self.key,
            "user_id": self.user_id,
            "device_id": self.device_id,
            "ip_address": self.ip_address,
            "network_fingerprint": self.network_fingerprint,
        }


class DeviceIdResponse(BaseModel):
    device_id: str
