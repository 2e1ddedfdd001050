"""Extracts text from HTML using ordered id/class/tag selector lists."""

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

from newsbrief.core.cleaning import normalize
from newsbrief.models.selectors import ByClass, ById, ByTag, SelectorSpec

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 20


def parse_html(html: str | BeautifulSoup) -> BeautifulSoup:
    """Parse HTML with lxml, passing already parsed documents through.

    Args:
        html: Raw HTML string or a BeautifulSoup document

    Returns:
        BeautifulSoup document.

    """
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html or '', 'lxml')


def class_string(tag: Tag) -> str:
    """Return a tag's class attribute as a single space-separated string."""
    value = tag.get('class')
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return ' '.join(value)


def has_class_containing(tag: Tag, name: str, tag_name: str | None = None) -> bool:
    """Whether ``tag`` (optionally of ``tag_name``) has a class containing ``name``."""
    if tag_name is not None and tag.name != tag_name:
        return False
    return name.lower() in class_string(tag).lower()


def find_first(soup: BeautifulSoup, selector: SelectorSpec) -> Tag | None:
    """Find the first element in document order that matches ``selector``.

    Args:
        soup: Parsed document
        selector: Simplified id, class-substring or tag selector

    Returns:
        Matching element, or None.

    """
    found = None
    if isinstance(selector, ById):
        found = soup.find(id=selector.value)
    elif isinstance(selector, ByClass):
        found = soup.find(lambda tag: has_class_containing(tag, selector.value))
    elif isinstance(selector, ByTag):
        found = soup.find(selector.value.lower())
    return found if isinstance(found, Tag) else None


def element_text(element: Tag | None) -> str:
    """Normalize an element's inner markup to text."""
    if element is None:
        return ''
    return normalize(element.decode_contents())


def extract_by_selectors(
    html: str | BeautifulSoup,
    selectors: Iterable[SelectorSpec],
    min_length: int = DEFAULT_MIN_LENGTH,
) -> str:
    """Extract text with the first selector whose result is long enough.

    Selectors are a priority list: as soon as one yields normalized text
    longer than ``min_length`` it is returned and the rest are not examined.

    Args:
        html: Raw HTML or a parsed document
        selectors: Selectors in priority order
        min_length: Text must be strictly longer than this to qualify

    Returns:
        Normalized text, or an empty string when no selector qualifies.

    """
    soup = parse_html(html)

    for selector in selectors:
        text = element_text(find_first(soup, selector))
        if len(text) > min_length:
            logger.debug(f'Selector {selector} matched {len(text)} chars')
            return text

    return ''
