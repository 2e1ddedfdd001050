from newsbrief.core.extraction import resolve_title
from newsbrief.core.extraction.selectors import parse_html
from newsbrief.core.extraction.title import strip_site_suffix
from newsbrief.core.sites.registry import SITE_PROFILES


def test_strip_site_suffix():
    assert strip_site_suffix('기사 제목입니다 - 한겨레') == '기사 제목입니다'
    assert strip_site_suffix('No suffix here') == 'No suffix here'


def test_title_tag_without_suffix():
    soup = parse_html('<html><head><title>금리 동결 결정 - 한겨레</title></head><body></body></html>')
    assert resolve_title(soup) == '금리 동결 결정'


def test_open_graph_overrides_title_tag():
    soup = parse_html(
        '<html><head><title>Site Home</title>'
        '<meta property="og:title" content="Open Graph Headline"></head><body></body></html>'
    )
    assert resolve_title(soup) == 'Open Graph Headline'


def test_site_selector_overrides_open_graph():
    soup = parse_html(
        '<html><head><meta property="og:title" content="Open Graph Headline"></head>'
        '<body><h2 class="media_end_head_headline">Test Title</h2></body></html>'
    )
    assert resolve_title(soup, SITE_PROFILES['naver']) == 'Test Title'


def test_heading_fallback_when_title_has_separator():
    soup = parse_html(
        '<html><head><title>Home | Daily News</title></head>'
        '<body><h1 class="article-title">Real Article Headline</h1></body></html>'
    )
    assert resolve_title(soup) == 'Real Article Headline'


def test_heading_fallback_skips_url_like_text():
    soup = parse_html('<html><body><h1>https://example.com/page</h1><h2>Second Level Headline</h2></body></html>')
    assert resolve_title(soup) == 'Second Level Headline'


def test_separator_kept_when_no_heading_qualifies():
    soup = parse_html('<html><head><title>Home | Daily News</title></head><body><h1>Hi</h1></body></html>')
    assert resolve_title(soup) == 'Home | Daily News'


def test_no_title_anywhere():
    assert resolve_title(parse_html('<html><body><p>text</p></body></html>')) == ''
