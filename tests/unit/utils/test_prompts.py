import pytest

from newsbrief.utils.prompts import load_prompt


def test_bundled_summary_prompt():
    prompt = load_prompt('summary_system')

    assert prompt
    assert prompt == prompt.strip()


def test_unknown_prompt():
    with pytest.raises(FileNotFoundError, match='missing_prompt'):
        load_prompt('missing_prompt')
