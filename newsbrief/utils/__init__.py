"""Utility components for newsbrief."""

from newsbrief.utils.files import get_logs_path, get_output_path, get_project_root, init_workdir
from newsbrief.utils.headers import HeaderGenerator, UserAgentRotator
from newsbrief.utils.logging import setup_local_logging
from newsbrief.utils.prompts import load_prompt

__all__ = [
    'HeaderGenerator',
    'UserAgentRotator',
    'get_logs_path',
    'get_output_path',
    'get_project_root',
    'init_workdir',
    'load_prompt',
    'setup_local_logging',
]
