"""Pseudo-identity derivation for anonymous submissions.

The key built here is a client-supplied signal (device id, IP, browser
fingerprint) and is trivially spoofable; it only deduplicates honest
clients.
"""

from __future__ import annotations

import hashlib
import ipaddress
import logging
import secrets
import string
import time
from typing import Optional

import httpx

from ratingz_api.models.identity import Identity

logger = logging.getLogger(__name__)

UNKNOWN_IP = 'unknown'
DEVICE_PREFIX = 'device_'
_BASE36 = string.digits + string.ascii_lowercase


def generate_device_id() -> str:
    """Return a new ``device_<9 base36 chars>_<epoch ms>`` token."""
    suffix = ''.join(secrets.choice(_BASE36) for _ in range(9))
    return f'{DEVICE_PREFIX}{suffix}_{int(time.time() * 1000)}'


def hash_fingerprint(raw: Optional[str]) -> Optional[str]:
    """Hash raw browser/display characteristics; None when absent."""
    if raw is None or not raw.strip():
        return None
    return hashlib.sha256(raw.encode('utf-8')).hexdigest()[:32]


def is_public_ip(value: str) -> bool:
    try:
        addr = ipaddress.ip_address(value)
    except ValueError:
        return False
    return not (addr.is_private or addr.is_loopback
                or addr.is_link_local or addr.is_unspecified)


class IdentityService:
    """Resolve the uniqueness key of the caller."""

    def __init__(
        self,
        http: Optional[httpx.AsyncClient] = None,
        lookup_url: str = '',
        timeout: float = 2.0,
    ) -> None:
        self.http = http
        self.lookup_url = lookup_url
        self.timeout = timeout

    async def lookup_public_ip(self) -> str:
        """Ask the public IP-lookup service; degrade to 'unknown'."""
        if self.http is None or not self.lookup_url:
            return UNKNOWN_IP
        try:
            response = await self.http.get(self.lookup_url,
                                           timeout=self.timeout)
            response.raise_for_status()
            ip = str(response.json()['ip'])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as error:
            logger.warning('ip_lookup_failed', extra={'err': str(error)})
            return UNKNOWN_IP
        return ip if ip else UNKNOWN_IP

    async def resolve_ip(
        self,
        forwarded_for: Optional[str] = None,
        real_ip: Optional[str] = None,
        peer: Optional[str] = None,
    ) -> str:
        """Pick the client IP from proxy headers or the socket peer.

        Loopback/private peers (local dev, internal proxies) are replaced
        by the egress IP reported by the lookup service.
        """
        candidate = None
        if forwarded_for:
            candidate = forwarded_for.split(',')[0].strip() or None
        candidate = candidate or (real_ip or '').strip() or peer

        if candidate and is_public_ip(candidate):
            return candidate
        if self.lookup_url and self.http is not None:
            return await self.lookup_public_ip()
        return candidate or UNKNOWN_IP

    @staticmethod
    def for_user(user_id: str) -> Identity:
        return Identity(key=f'user:{user_id}', kind='user', user_id=user_id)

    @staticmethod
    def for_device(
        device_id: str,
        ip_address: str,
        fingerprint_raw: Optional[str] = None,
    ) -> Identity:
        fingerprint = hash_fingerprint(fingerprint_raw)
        key = f'device:{device_id}|ip:{ip_address}'
        if fingerprint:
            key = f'{key}|fp:{fingerprint}'
        return Identity(
            key=key,
            kind='device',
            device_id=device_id,
            ip_address=ip_address,
            network_fingerprint=fingerprint,
        )
