"""Output formatting for processed articles."""

from newsbrief.outputs.utils import (
    OUTPUT_FORMATS,
    format_content,
    output_filename,
    save_formatted_content,
    save_to_directory,
)

__all__ = ['OUTPUT_FORMATS', 'format_content', 'output_filename', 'save_formatted_content', 'save_to_directory']
