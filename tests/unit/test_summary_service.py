import pytest

from newsbrief.core.summarization import AISummarizer, SummaryService, format_summary
from newsbrief.exceptions import ContentTooShortError

ARTICLE = (
    '정부가 내년도 반도체 산업 지원 예산을 대폭 늘리기로 했다. '
    '산업통상자원부는 반도체 생태계 강화를 위한 종합 대책을 발표했다. '
    '업계는 정부의 지원 확대가 반도체 경쟁력 회복에 도움이 될 것으로 기대했다.'
)


@pytest.fixture
def failing_ai(mocker):
    ai = mocker.Mock(spec=AISummarizer)
    ai.available = True
    ai.summarize.return_value = None
    return ai


def test_content_length_boundary():
    service = SummaryService()

    with pytest.raises(ContentTooShortError) as exc_info:
        service.summarize('제목', 'a' * 99)
    assert exc_info.value.length == 99

    result = service.summarize('제목', 'a' * 100)
    assert result.method == 'extractive'


def test_length_is_measured_after_stripping():
    with pytest.raises(ContentTooShortError):
        SummaryService().summarize('제목', '   ' + 'a' * 99 + '\n\n')


def test_extractive_template():
    result = SummaryService().summarize('반도체 지원', ARTICLE)

    assert result.method == 'extractive'
    assert result.summary.startswith('📋 **뉴스 요약**')
    assert result.summary.endswith('💡 이 요약은 원문에서 중요한 문장들을 추출하여 생성되었습니다.')
    assert '정부가 내년도 반도체 산업 지원 예산을 대폭 늘리기로 했다.' in result.summary


def test_ai_summary_preferred(mocker):
    ai = mocker.Mock(spec=AISummarizer)
    ai.available = True
    ai.summarize.return_value = '정부가 반도체 지원을 확대한다.'

    result = SummaryService(ai=ai).summarize('반도체 지원', ARTICLE)

    assert result.method == 'ai'
    assert result.summary.startswith('🤖 **AI 뉴스 요약**')
    assert '정부가 반도체 지원을 확대한다.' in result.summary


def test_falls_back_to_extractive_when_ai_fails(failing_ai):
    result = SummaryService(ai=failing_ai).summarize('반도체 지원', ARTICLE)

    failing_ai.summarize.assert_called_once()
    assert result.method == 'extractive'


def test_leading_text_used_when_no_sentence_qualifies():
    content = '짧은 문장. ' * 30
    result = SummaryService().summarize('제목', content)

    assert result.method == 'extractive'
    assert content.strip()[:300] in result.summary


def test_format_summary_strips_whitespace():
    formatted = format_summary('  요약 내용  \n', 'extractive')
    assert '\n\n요약 내용\n\n' in formatted
    assert formatted == formatted.strip()
