"""Markdown output formatter for processed articles."""

import os

from newsbrief.models import NewsArticle


def format_markdown(article: NewsArticle, domain: str) -> str:
    """Format a processed article as Markdown.

    Args:
        article: Extracted and summarized article
        domain: Domain name of the source

    Returns:
        Formatted markdown string.

    """
    lines = [
        f'# {article.title or "Untitled"}',
        '',
        '---',
        f'**Source:** {article.url}',
        f'**Domain:** {domain}',
        f'**Extracted:** {article.extracted_at.isoformat()}',
        '---',
        '',
        '## Summary',
        '',
        article.summary.strip(),
        '',
        '## Content',
        '',
        article.content.strip(),
        '',
    ]
    return '\n'.join(lines)


def save_markdown(filepath: str, article: NewsArticle, domain: str):
    """Format and save an article as a Markdown file.

    Args:
        filepath: Path to save the file
        article: Extracted and summarized article
        domain: Domain name of the source

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(format_markdown(article, domain))
