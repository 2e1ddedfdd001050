"""JSON output formatter for processed articles."""

import json
import os

from newsbrief.models import NewsArticle


def format_json(article: NewsArticle, domain: str) -> dict:
    """Format a processed article as a JSON-serializable dict.

    Args:
        article: Extracted and summarized article
        domain: Domain name of the source

    Returns:
        Dictionary with metadata and article fields.

    """
    return {
        'url': article.url,
        'domain': domain,
        'extracted_at': article.extracted_at.isoformat(),
        'title': article.title,
        'summary': article.summary,
        'content': article.content,
    }


def save_json(filepath: str, article: NewsArticle, domain: str):
    """Format and save an article as a JSON file.

    Args:
        filepath: Path to save the file
        article: Extracted and summarized article
        domain: Domain name of the source

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(format_json(article, domain), f, indent=2, ensure_ascii=False)
