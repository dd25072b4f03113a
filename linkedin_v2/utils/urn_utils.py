"""URN utility functions for LinkedIn API."""
from typing import Optional


def build_linkedin_urn(entity_type: str, entity_id: str) -> str:
    """
    Build LinkedIn URN from entity type and ID.

    Args:
        entity_type: Entity type (e.g., "person", "organization")
        entity_id: Entity ID

    Returns:
        Formatted URN

    Examples:
        >>> build_linkedin_urn("person", "abc123")
        'urn:li:person:abc123'
    """
    return f"urn:li:{entity_type}:{entity_id}"


def normalize_person_urn(value: Optional[str]) -> Optional[str]:
    """
    Turn a bare member id into a person URN, leave URNs untouched.

    Args:
        value: Member id or any LinkedIn URN

    Returns:
        URN string, or None for empty input

    Examples:
        >>> normalize_person_urn("abc123")
        'urn:li:person:abc123'
        >>> normalize_person_urn("urn:li:organization:42")
        'urn:li:organization:42'
    """
    if not value or not value.strip():
        return None

    raw = value.strip()
    if raw.startswith("urn:li:"):
        return raw
    return build_linkedin_urn("person", raw)
