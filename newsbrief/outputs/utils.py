"""Format selection and file naming for processed articles."""

import os
import re
from urllib.parse import urlparse

from newsbrief.models import NewsArticle
from newsbrief.outputs.json_output import format_json, save_json
from newsbrief.outputs.markdown_output import format_markdown, save_markdown

OUTPUT_FORMATS = ('json', 'markdown')
EXTENSIONS = {'json': 'json', 'markdown': 'md'}


def _domain_of(article: NewsArticle) -> str:
    return (urlparse(article.url).hostname or '').removeprefix('www.')


def format_content(article: NewsArticle, output_format: str = 'json') -> str | dict:
    """Format a processed article in the specified format.

    Args:
        article: Extracted and summarized article
        output_format: Output format ('json' or 'markdown'). Defaults to 'json'.

    Returns:
        Formatted content - dict for JSON, string for Markdown.

    """
    if output_format == 'markdown':
        return format_markdown(article, _domain_of(article))
    return format_json(article, _domain_of(article))


def output_filename(article: NewsArticle, output_format: str = 'json') -> str:
    """Build a filesystem-safe file name from the article URL.

    Args:
        article: Extracted and summarized article
        output_format: Output format, selects the extension

    Returns:
        File name such as 'n.news.naver.com_article_001_0000001.json'.

    """
    parsed = urlparse(article.url)
    base = re.sub(r'[^A-Za-z0-9._-]+', '_', f'{parsed.hostname or "article"}{parsed.path}').strip('_')
    return f'{base[:100]}.{EXTENSIONS.get(output_format, "json")}'


def save_formatted_content(filepath: str, article: NewsArticle, output_format: str = 'json') -> str:
    """Format and save a processed article to file.

    Args:
        filepath: Path to save the file
        article: Extracted and summarized article
        output_format: Output format ('json' or 'markdown'). Defaults to 'json'.

    Returns:
        Path to the saved file.

    """
    if output_format == 'markdown':
        save_markdown(filepath, article, _domain_of(article))
    else:
        save_json(filepath, article, _domain_of(article))

    return filepath


def save_to_directory(directory: str, article: NewsArticle, output_format: str = 'json') -> str:
    """Save an article into ``directory`` under a name derived from its URL."""
    return save_formatted_content(os.path.join(directory, output_filename(article, output_format)), article, output_format)
