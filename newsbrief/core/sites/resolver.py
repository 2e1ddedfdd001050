"""Maps article URLs to publishers and their selector profiles."""

from dataclasses import dataclass
from urllib.parse import urlparse

from newsbrief.core.sites.registry import SITE_PROFILES, SITE_TOKENS, SUPPORTED_NEWS_SITES
from newsbrief.exceptions import InvalidUrlError
from newsbrief.models.requests import SupportedSite
from newsbrief.models.selectors import SiteProfile


@dataclass(frozen=True)
class SiteResolution:
    """Publisher information derived from a URL.

    Attributes:
        domain: Hostname without a leading 'www.'
        site_key: Publisher token, None for unknown publishers
        profile: Selector profile for the publisher, None when there is none

    """

    domain: str
    site_key: str | None = None
    profile: SiteProfile | None = None


def validate_url(url: str) -> str:
    """Check that ``url`` is an absolute http(s) URL with a host.

    Args:
        url: URL supplied by the caller

    Returns:
        The URL stripped of surrounding whitespace.

    Raises:
        InvalidUrlError: If the URL is malformed

    """
    url = (url or '').strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidUrlError(url) from e

    if parsed.scheme not in ('http', 'https') or not hostname:
        raise InvalidUrlError(url)
    return url


def extract_domain(url: str) -> str:
    """Extract the hostname of ``url`` without a leading 'www.'.

    Raises:
        InvalidUrlError: If the URL has no hostname

    """
    try:
        hostname = urlparse(url.strip()).hostname
    except ValueError as e:
        raise InvalidUrlError(url) from e

    if not hostname:
        raise InvalidUrlError(url)
    return hostname.removeprefix('www.')


def is_supported_site(domain: str) -> bool:
    """Whether ``domain`` equals or contains a supported publisher domain."""
    domain = domain.lower()
    return any(site == domain or site in domain for site in SUPPORTED_NEWS_SITES)


def site_key_of(domain: str) -> str | None:
    """Return the first publisher token contained in ``domain``, or None."""
    domain = domain.lower()
    for token in SITE_TOKENS:
        if token in domain:
            return token
    return None


def resolve_site(url: str) -> SiteResolution:
    """Resolve the publisher and selector profile for ``url``.

    Args:
        url: Article URL

    Returns:
        SiteResolution with the domain, site key and profile (if any).

    Raises:
        InvalidUrlError: If the URL has no hostname

    """
    domain = extract_domain(url)
    site_key = site_key_of(domain)
    profile = SITE_PROFILES.get(site_key) if site_key else None
    return SiteResolution(domain=domain, site_key=site_key, profile=profile)


def get_supported_sites() -> list[SupportedSite]:
    """List the supported publishers with their display names."""
    return [
        SupportedSite(domain=domain, name=name, url=f'https://{domain}') for domain, name in SUPPORTED_NEWS_SITES.items()
    ]


def supported_site_names() -> list[str]:
    """Display names of the supported publishers, in table order."""
    return list(SUPPORTED_NEWS_SITES.values())
