"""Publisher tables and URL to site resolution."""

from newsbrief.core.sites.registry import SITE_PROFILES, SITE_TOKENS, SUPPORTED_NEWS_SITES
from newsbrief.core.sites.resolver import (
    SiteResolution,
    extract_domain,
    get_supported_sites,
    is_supported_site,
    resolve_site,
    site_key_of,
    supported_site_names,
    validate_url,
)

__all__ = [
    'SITE_PROFILES',
    'SITE_TOKENS',
    'SUPPORTED_NEWS_SITES',
    'SiteResolution',
    'extract_domain',
    'get_supported_sites',
    'is_supported_site',
    'resolve_site',
    'site_key_of',
    'supported_site_names',
    'validate_url',
]
