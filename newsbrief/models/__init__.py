"""Pydantic models for selectors, results and requests."""

from newsbrief.models.requests import (
    ExtractRequest,
    ExtractResponse,
    NewsArticle,
    SummaryRequest,
    SummaryResponse,
    SupportedSite,
)
from newsbrief.models.results import ExtractedArticle, ExtractionResult, FetchResult, Sentence, SummaryResult
from newsbrief.models.selectors import ByClass, ById, ByTag, SelectorSpec, SiteProfile

__all__ = [
    'ByClass',
    'ById',
    'ByTag',
    'SelectorSpec',
    'SiteProfile',
    'ExtractedArticle',
    'ExtractionResult',
    'FetchResult',
    'Sentence',
    'SummaryResult',
    'ExtractRequest',
    'ExtractResponse',
    'NewsArticle',
    'SummaryRequest',
    'SummaryResponse',
    'SupportedSite',
]
