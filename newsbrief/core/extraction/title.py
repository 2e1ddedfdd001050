"""Headline resolution from <title>, Open Graph, site selectors and heading patterns."""

import logging
import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from newsbrief.core.cleaning import normalize
from newsbrief.core.extraction.selectors import element_text, extract_by_selectors, has_class_containing
from newsbrief.models.selectors import SiteProfile

logger = logging.getLogger(__name__)

SITE_TITLE_MIN_LENGTH = 3
HEADING_MIN_LENGTH = 5
HEADING_MAX_LENGTH = 200

TRAILING_SITE_SUFFIX = re.compile(r'\s+-\s+[^-]*$')
URL_LIKE = re.compile(r'^(?:https?://|www\.)', re.IGNORECASE)


def _heading_with_class(tag_name: str, name: str) -> Callable[[BeautifulSoup], Tag | None]:
    return lambda soup: soup.find(lambda tag: has_class_containing(tag, name, tag_name=tag_name))


GENERIC_TITLE_PATTERNS: tuple[tuple[str, Callable[[BeautifulSoup], Tag | None]], ...] = (
    ('<h1 class*=title>', _heading_with_class('h1', 'title')),
    ('<h1 class*=headline>', _heading_with_class('h1', 'headline')),
    ('<h2 class*=title>', _heading_with_class('h2', 'title')),
    ('<h2 class*=headline>', _heading_with_class('h2', 'headline')),
    ('<h1>', lambda soup: soup.find('h1')),
    ('<h2>', lambda soup: soup.find('h2')),
)


def strip_site_suffix(title: str) -> str:
    """Drop a trailing ' - Site Name' segment."""
    return TRAILING_SITE_SUFFIX.sub('', title).strip()


def title_from_title_tag(soup: BeautifulSoup) -> str:
    """Text of the document <title>, minus the trailing site name."""
    tag = soup.find('title')
    if not isinstance(tag, Tag):
        return ''
    return strip_site_suffix(element_text(tag))


def title_from_open_graph(soup: BeautifulSoup) -> str:
    """Content of the og:title meta tag, if any."""
    meta = soup.find('meta', attrs={'property': 'og:title'})
    if not isinstance(meta, Tag):
        return ''
    content = meta.get('content')
    return normalize(content if isinstance(content, str) else None)


def needs_heading_fallback(title: str) -> bool:
    """Whether the title is empty or still looks like it carries a site suffix."""
    return not title or '|' in title or '-' in title


def title_from_headings(soup: BeautifulSoup) -> str:
    """First plausible headline among the generic <h1>/<h2> patterns."""
    for description, finder in GENERIC_TITLE_PATTERNS:
        text = element_text(finder(soup))
        if HEADING_MIN_LENGTH <= len(text) <= HEADING_MAX_LENGTH and not URL_LIKE.match(text):
            logger.debug(f'Title taken from {description}')
            return text
    return ''


def resolve_title(soup: BeautifulSoup, profile: SiteProfile | None = None) -> str:
    """Resolve the article headline.

    Each step overrides the previous one only when it succeeds:
    the <title> tag, then og:title, then the site profile's title selectors,
    and finally generic headings when the title is empty or still contains
    '|' or '-'.

    Args:
        soup: Parsed document
        profile: Selector profile of the publisher, if known

    Returns:
        The headline, possibly empty.

    """
    title = title_from_title_tag(soup)

    og_title = title_from_open_graph(soup)
    if og_title:
        title = og_title

    if profile is not None:
        site_title = extract_by_selectors(soup, profile.title_selectors, min_length=SITE_TITLE_MIN_LENGTH)
        if site_title:
            title = site_title

    if needs_heading_fallback(title):
        heading = title_from_headings(soup)
        if heading:
            title = heading

    return title
