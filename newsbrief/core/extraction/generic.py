"""Fallback content extraction for pages without a site profile."""

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from newsbrief.core.extraction.selectors import element_text, has_class_containing, parse_html

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 100
MIN_PARAGRAPH_LENGTH = 20
MIN_PARAGRAPHS = 3

CONTENT_DIV_CLASSES = ('content', 'article', 'body', 'txt')


def _is_content_div(tag: Tag) -> bool:
    return tag.name == 'div' and any(has_class_containing(tag, name) for name in CONTENT_DIV_CLASSES)


def _is_article_section(tag: Tag) -> bool:
    return has_class_containing(tag, 'article', tag_name='section')


# (description, finder) in the order they are tried
CONTENT_PATTERNS: tuple[tuple[str, Callable[[BeautifulSoup], Tag | None]], ...] = (
    ('<article>', lambda soup: soup.find('article')),
    ('<div class*=content|article|body|txt>', lambda soup: soup.find(_is_content_div)),
    ('<section class*=article>', lambda soup: soup.find(_is_article_section)),
    ('<main>', lambda soup: soup.find('main')),
)


def extract_paragraphs(soup: BeautifulSoup) -> str:
    """Join every sufficiently long ``<p>`` into one text block.

    Args:
        soup: Parsed document

    Returns:
        Joined paragraphs, or an empty string when fewer than three qualify
        or the aggregate is too short.

    """
    paragraphs = []
    for p in soup.find_all('p'):
        text = element_text(p)
        if len(text) > MIN_PARAGRAPH_LENGTH:
            paragraphs.append(text)

    combined = ' '.join(paragraphs)
    if len(paragraphs) >= MIN_PARAGRAPHS and len(combined) > MIN_CONTENT_LENGTH:
        return combined
    return ''


def extract_generic(html: str | BeautifulSoup) -> str:
    """Extract article body text with site-independent patterns.

    Args:
        html: Raw HTML or a parsed document

    Returns:
        Body text, or an empty string when nothing qualifies.

    """
    soup = parse_html(html)

    for description, finder in CONTENT_PATTERNS:
        found = finder(soup)
        text = element_text(found if isinstance(found, Tag) else None)
        if len(text) > MIN_CONTENT_LENGTH:
            logger.debug(f'Generic pattern {description} matched {len(text)} chars')
            return text

    text = extract_paragraphs(soup)
    if text:
        logger.debug(f'Paragraph aggregation produced {len(text)} chars')
    else:
        logger.debug('Generic extraction found no content')
    return text
