"""Site-aware and generic article extraction."""

from newsbrief.core.extraction.generic import extract_generic
from newsbrief.core.extraction.scraper import NewsScraper
from newsbrief.core.extraction.selectors import extract_by_selectors
from newsbrief.core.extraction.title import resolve_title

__all__ = ['NewsScraper', 'extract_by_selectors', 'extract_generic', 'resolve_title']
