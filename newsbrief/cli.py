"""
cli.py
=======
Command-line entry point: extract and summarize Korean news articles.
"""

import argparse
import json
import os
import sys
from dataclasses import replace

import logfire
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown

from newsbrief.config import AppConfig
from newsbrief.core.pipeline import Pipeline
from newsbrief.outputs import OUTPUT_FORMATS, format_content, save_to_directory
from newsbrief.utils import get_output_path, init_workdir, setup_local_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description='Extract and summarize news articles from Korean news sites')
    parser.add_argument('--url', type=str, help='Single article URL to process')
    parser.add_argument('--file', type=str, help='File containing URLs (one per line)')
    parser.add_argument('--limit', type=int, help='Limit number of URLs to process from file')
    parser.add_argument('--sites', action='store_true', help='Show the supported news sites')
    parser.add_argument('--extract-only', action='store_true', help='Print the extracted article without summarizing')
    parser.add_argument('--no-ai', action='store_true', help='Always use the extractive summarizer')
    parser.add_argument('--max-sentences', type=int, help='Sentences in an extractive summary')
    parser.add_argument(
        '--output',
        choices=OUTPUT_FORMATS,
        default='markdown',
        help='Format for printed and saved articles (default: markdown)',
    )
    parser.add_argument(
        '--save',
        nargs='?',
        const='',
        default=None,
        metavar='DIR',
        help='Save processed articles (default directory: .newsbrief/articles)',
    )
    parser.add_argument('--log-level', type=str, default='INFO', help='File log level (default: INFO)')
    return parser


def read_urls(path: str) -> list[str]:
    """Read URLs from a text file, skipping blank lines and comments."""
    with open(path, encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


def build_config(args: argparse.Namespace) -> AppConfig:
    """Environment configuration with command-line overrides applied."""
    config = AppConfig.from_env()
    overrides = {}
    if args.no_ai:
        overrides['use_ai'] = False
    if args.max_sentences is not None:
        if args.max_sentences < 1:
            raise ValueError(f'--max-sentences must be at least 1, got {args.max_sentences}')
        overrides['max_sentences'] = args.max_sentences
    if not overrides:
        return config

    return replace(config, **overrides)


def main():  # noqa: C901
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args()
    console = Console()

    logfire_token = os.getenv('LOGFIRE_TOKEN')
    if logfire_token:
        logfire.configure(token=logfire_token)
    else:
        logfire.configure(send_to_logfire=False, console=False)

    log_file = setup_local_logging(args.log_level)
    console.print(f'[dim]Logging to {log_file}[/dim]')

    try:
        config = build_config(args)
    except ValueError as e:
        console.print(f'[bold red]Configuration error: {e}[/bold red]')
        sys.exit(1)

    pipeline = Pipeline(config)

    if args.sites:
        pipeline.show_supported_sites()
        return

    urls = []
    if args.url:
        urls.append(args.url)
    if args.file:
        if not os.path.exists(args.file):
            console.print(f'[bold red]Error: File not found: {args.file}[/bold red]')
            sys.exit(1)
        urls.extend(read_urls(args.file))

    if not urls:
        console.print('[bold red]Error: No URLs provided[/bold red]')
        sys.exit(1)

    if args.limit:
        urls = urls[: args.limit]

    if args.extract_only:
        failed = 0
        for url in urls:
            response = pipeline.extract(url)
            if response.success:
                # Article text often contains brackets that rich would read as markup
                console.print(response.title, style='bold', markup=False)
                console.print(f'\n{response.content}\n', markup=False)
            else:
                console.print(f'{url}: {response.error}', style='bold red', markup=False)
                failed += 1
        sys.exit(1 if failed else 0)

    if config.use_ai and config.llm is None:
        console.print('[dim]No LLM API key configured - using extractive summaries[/dim]')

    results = pipeline.process_urls(urls)

    save_dir = None
    if args.save is not None:
        init_workdir()
        save_dir = args.save or str(get_output_path())

    for article in results['successful']:
        formatted = format_content(article, args.output)
        if args.output == 'markdown':
            console.print(Markdown(str(formatted)))
        else:
            console.print_json(json.dumps(formatted, ensure_ascii=False))

        if save_dir is not None:
            path = save_to_directory(save_dir, article, args.output)
            console.print(f'[green]Saved to {path}[/green]')

    console.print(
        f'\n[bold]Done:[/bold] {len(results["successful"])} succeeded, {len(results["failed"])} failed'
    )
    if results['failed']:
        sys.exit(1)


if __name__ == '__main__':
    main()
