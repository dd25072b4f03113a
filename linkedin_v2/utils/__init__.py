"""Helper functions for the LinkedIn client."""

from linkedin_v2.utils.urn_utils import build_linkedin_urn, normalize_person_urn

__all__ = ["build_linkedin_urn", "normalize_person_urn"]
