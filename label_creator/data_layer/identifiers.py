"""Identifier resolution across the store-generated and legacy id schemes.

Records created before the store issued its own ids carry a self-assigned
string id in a dedicated ``id`` attribute. Newer records are addressed by
a 24-character hexadecimal primary key. Both must keep resolving.
"""
import re
from dataclasses import dataclass
from typing import Union


PRIMARY_KEY_LENGTH = 24

_PRIMARY_KEY_PATTERN = re.compile(r"[0-9a-f]{%d}" % PRIMARY_KEY_LENGTH)


@dataclass(frozen=True)
class PrimaryKey:
    """Lookup by the store-generated primary key."""

    value: str

    def matches(self, record_id: str, legacy_id: str = "") -> bool:
        return record_id == self.value


@dataclass(frozen=True)
class LegacyKey:
    """Lookup by the legacy custom ``id`` attribute."""

    value: str

    def matches(self, record_id: str, legacy_id: str = "") -> bool:
        return legacy_id == self.value


LookupKey = Union[PrimaryKey, LegacyKey]


def is_primary_key(identifier: str) -> bool:
    """Check whether ``identifier`` is a canonical store-generated id.

    The store round-trips a parsed id through its lower-case hex form, so
    upper-case hex never counts as a primary key.
    """
    if not isinstance(identifier, str):
        return False
    return _PRIMARY_KEY_PATTERN.fullmatch(identifier) is not None


def resolve_lookup(identifier: str) -> LookupKey:
    """Decide which lookup path an identifier takes.

    Never raises: anything that is not a canonical primary key falls
    through to the legacy path.

    Args:
        identifier: Caller-supplied id (e.g., "65f1c0ffee...", "default-1")

    Returns:
        PrimaryKey or LegacyKey
    """
    if is_primary_key(identifier):
        return PrimaryKey(identifier)
    return LegacyKey("" if identifier is None else str(identifier))


class IdentifierResolver:
    """Resolves caller-supplied ids to lookup keys."""

    def resolve_lookup(self, identifier: str) -> LookupKey:
        return resolve_lookup(identifier)
