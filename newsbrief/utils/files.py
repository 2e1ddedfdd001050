"""File and directory helpers for newsbrief's working directory."""

from pathlib import Path

WORKDIR_NAME = '.newsbrief'
ROOT_MARKERS = ('.git', 'pyproject.toml', WORKDIR_NAME, 'requirements.txt')


def get_project_root() -> Path:
    """Find the project root by searching upwards from the current working directory.

    Stops at the first directory containing a marker file and falls back to the
    current directory when none is found.
    """
    current_path = Path.cwd()

    for parent in [current_path, *current_path.parents]:
        if any((parent / marker).exists() for marker in ROOT_MARKERS):
            return parent

    return current_path


def get_workdir_path() -> Path:
    """Return the .newsbrief directory in the project root."""
    return get_project_root() / WORKDIR_NAME


def get_logs_path() -> Path:
    """Return the path to the logs directory in .newsbrief."""
    return get_workdir_path() / 'logs'


def get_output_path() -> Path:
    """Return the default directory for saved articles."""
    return get_workdir_path() / 'articles'


def init_workdir() -> Path:
    """Create the .newsbrief directory layout and return its path."""
    workdir = get_workdir_path()
    get_logs_path().mkdir(parents=True, exist_ok=True)
    get_output_path().mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = workdir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by newsbrief\n*\n')

    return workdir
