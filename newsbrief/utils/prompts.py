"""Prompt templates bundled as package data."""

from importlib.resources import files


def load_prompt(name: str) -> str:
    """Read ``prompts/<name>.md`` from the installed newsbrief package.

    Raises:
        FileNotFoundError: If no prompt with that name is bundled

    """
    resource = files('newsbrief') / 'prompts' / f'{name}.md'
    if not resource.is_file():
        raise FileNotFoundError(f'No bundled prompt named {name!r}')
    return resource.read_text(encoding='utf-8').strip()
