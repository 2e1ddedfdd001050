import pytest

from newsbrief.core.fetcher import HTMLFetcher
from newsbrief.models import FetchResult

NAVER_SENTENCES = [
    '정부가 내년도 반도체 산업 지원 예산을 대폭 늘리기로 했다',
    '산업통상자원부는 15일 반도체 생태계 강화를 위한 종합 대책을 발표했다',
    '이번 대책에는 연구개발 세액공제 확대와 전문 인력 양성 방안이 포함됐다',
    '업계는 정부의 지원 확대가 반도체 경쟁력 회복에 도움이 될 것으로 기대했다',
    '다만 일부 전문가들은 재정 부담과 지원 대상 선정의 공정성을 우려했다',
    '정부는 다음 달까지 세부 시행 계획을 마련해 발표할 예정이다',
]


def naver_article_html(title: str = 'Test Title', sentences: list[str] | None = None) -> str:
    body = '\n'.join(f'        {sentence}.<br>' for sentence in (sentences or NAVER_SENTENCES))
    return f"""
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"></head>
    <body>
        <div class="media_end_head_title">
            <h2 class="media_end_head_headline">{title}</h2>
        </div>
        <div id="dic_area">
{body}
        </div>
        <footer><p>Copyright NAVER Corp. All Rights Reserved.</p></footer>
    </body>
    </html>
    """


@pytest.fixture
def make_naver_html():
    """Factory for naver article pages with a custom title or body."""
    return naver_article_html


@pytest.fixture
def naver_html():
    return naver_article_html()


@pytest.fixture
def naver_content():
    return ' '.join(f'{sentence}.' for sentence in NAVER_SENTENCES)


@pytest.fixture
def generic_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Local Council Approves New Park - Example Times</title>
        <meta property="og:title" content="Local Council Approves New Park">
    </head>
    <body>
        <nav><a href="/">Home</a></nav>
        <article>
            <p>The city council voted on Tuesday to approve funding for a new riverside park.</p>
            <p>Construction is expected to begin next spring and last about eighteen months.</p>
            <p>Residents welcomed the decision after years of campaigning for more green space.</p>
        </article>
    </body>
    </html>
    """


@pytest.fixture
def make_fetcher(mocker):
    """Build a mock fetcher that returns ``html`` for any URL."""

    def _make(html: str, status_code: int = 200):
        fetcher = mocker.Mock(spec=HTMLFetcher)
        fetcher.fetch.side_effect = lambda url: FetchResult(url=url, html=html, status_code=status_code)
        return fetcher

    return _make


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
