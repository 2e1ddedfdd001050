"""newsbrief - Korean news article extraction and summarization.

Site-aware extraction for major Korean publishers, generic extraction for the
rest, and an AI summary with an extractive fallback.
"""

from newsbrief.config import AppConfig
from newsbrief.core.cleaning import normalize
from newsbrief.core.extraction import NewsScraper, extract_by_selectors, extract_generic, resolve_title
from newsbrief.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher
from newsbrief.core.pipeline import Pipeline
from newsbrief.core.sites import get_supported_sites, is_supported_site, resolve_site, site_key_of
from newsbrief.core.summarization import AISummarizer, SummaryService, extractive_summary
from newsbrief.exceptions import (
    ContentTooShortError,
    ExtractionError,
    FetchError,
    InvalidUrlError,
    NewsBriefError,
    UnsupportedSiteError,
)
from newsbrief.llm_config import LLMConfig, create_agent, create_model
from newsbrief.models import (
    ByClass,
    ById,
    ByTag,
    ExtractedArticle,
    ExtractionResult,
    ExtractRequest,
    ExtractResponse,
    NewsArticle,
    SiteProfile,
    SummaryRequest,
    SummaryResponse,
)

__all__ = [
    # Entry points
    'Pipeline',
    'AppConfig',
    # Extraction
    'NewsScraper',
    'normalize',
    'extract_by_selectors',
    'extract_generic',
    'resolve_title',
    # Sites
    'get_supported_sites',
    'is_supported_site',
    'resolve_site',
    'site_key_of',
    # Fetchers
    'HTMLFetcher',
    'SimpleFetcher',
    'create_fetcher',
    # Summarization
    'AISummarizer',
    'SummaryService',
    'extractive_summary',
    # LLM configuration
    'LLMConfig',
    'create_agent',
    'create_model',
    # Errors
    'NewsBriefError',
    'InvalidUrlError',
    'UnsupportedSiteError',
    'FetchError',
    'ExtractionError',
    'ContentTooShortError',
    # Models
    'ByClass',
    'ById',
    'ByTag',
    'SiteProfile',
    'ExtractedArticle',
    'ExtractionResult',
    'ExtractRequest',
    'ExtractResponse',
    'NewsArticle',
    'SummaryRequest',
    'SummaryResponse',
]
