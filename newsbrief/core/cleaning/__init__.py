"""Markup to text normalization."""

from newsbrief.core.cleaning.normalizer import normalize

__all__ = ['normalize']
