"""Reduces markup fragments to clean, single-spaced text."""

import re

# A name (or ! for comments and doctypes) must follow the bracket, so a decoded
# comparison such as "< 2500" stays text
TAG_PATTERN = re.compile(r'</?[A-Za-z!][^<>]*>')
WHITESPACE_PATTERN = re.compile(r'\s+')

# &amp; is decoded last so '&amp;lt;' becomes '&lt;' within a single pass
HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ('&nbsp;', ' '),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
    ('&amp;', '&'),
)


def _normalize_once(fragment: str) -> str:
    text = TAG_PATTERN.sub('', fragment)
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def normalize(fragment: str | None) -> str:
    """Strip tags, decode common entities and collapse whitespace.

    Decoding can reveal new tags or entities ('&lt;b&gt;' becomes '<b>'), so the
    pass is repeated until the text stops changing. Every pass after the first
    either shrinks the text or leaves it as is, which guarantees termination
    and makes the function idempotent.

    Args:
        fragment: Markup fragment (may be None or empty)

    Returns:
        Clean text, possibly empty.

    """
    if not fragment:
        return ''

    text = _normalize_once(fragment)
    while True:
        again = _normalize_once(text)
        if again == text:
            return text
        text = again
