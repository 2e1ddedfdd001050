"""Extractive and AI summarization."""

from newsbrief.core.summarization.ai import AISummarizer
from newsbrief.core.summarization.extractive import extractive_summary
from newsbrief.core.summarization.service import SummaryService, format_summary

__all__ = ['AISummarizer', 'SummaryService', 'extractive_summary', 'format_summary']
