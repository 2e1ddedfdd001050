import pytest
import requests

from newsbrief.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher
from newsbrief.exceptions import FetchError

URL = 'https://n.news.naver.com/article/001/0000001'


@pytest.fixture
def fetcher():
    fetcher = SimpleFetcher(timeout=3.0)
    yield fetcher
    fetcher.close()


def _response(mocker, status_code=200, text='<html></html>', encoding='utf-8'):
    return mocker.Mock(status_code=status_code, text=text, encoding=encoding, apparent_encoding='EUC-KR')


def test_fetch_success(mocker, fetcher):
    get = mocker.patch.object(fetcher.session, 'get', return_value=_response(mocker, text='<html>본문</html>'))

    result = fetcher.fetch(URL)

    assert result.html == '<html>본문</html>'
    assert result.status_code == 200
    assert result.url == URL
    _, kwargs = get.call_args
    assert kwargs['timeout'] == 3.0
    assert kwargs['headers']['Accept-Language'].startswith('ko-KR')


def test_missing_charset_uses_detected_encoding(mocker, fetcher):
    response = _response(mocker, encoding='ISO-8859-1')
    mocker.patch.object(fetcher.session, 'get', return_value=response)

    fetcher.fetch(URL)

    assert response.encoding == 'EUC-KR'


@pytest.mark.parametrize(
    'status_code, kind, message',
    [
        (403, 'blocked', '해당 사이트에서 접근을 차단했습니다.'),
        (404, 'not_found', '페이지를 찾을 수 없습니다.'),
        (500, 'generic', '뉴스를 가져오는 중 오류가 발생했습니다.'),
        (301, 'generic', '뉴스를 가져오는 중 오류가 발생했습니다.'),
    ],
)
def test_status_codes_map_to_failure_kinds(mocker, fetcher, status_code, kind, message):
    mocker.patch.object(fetcher.session, 'get', return_value=_response(mocker, status_code=status_code))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch(URL)

    assert exc_info.value.kind == kind
    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == message


def test_timeout(mocker, fetcher):
    mocker.patch.object(fetcher.session, 'get', side_effect=requests.Timeout('slow'))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch(URL)

    assert exc_info.value.kind == 'timeout'
    assert exc_info.value.is_retryable
    assert '시간이 초과' in exc_info.value.message


def test_transport_error_is_generic(mocker, fetcher):
    mocker.patch.object(fetcher.session, 'get', side_effect=requests.ConnectionError('refused'))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch(URL)

    assert exc_info.value.kind == 'generic'
    assert not exc_info.value.is_retryable


def test_without_session_uses_requests_get(mocker):
    get = mocker.patch('newsbrief.core.fetcher.simple.requests.get', return_value=_response(mocker))

    with SimpleFetcher(use_session=False) as fetcher:
        fetcher.fetch(URL)

    get.assert_called_once()


def test_classify_status():
    assert HTMLFetcher.classify_status(200) is None
    assert HTMLFetcher.classify_status(204) is None
    assert HTMLFetcher.classify_status(403) == 'blocked'


def test_create_fetcher():
    fetcher = create_fetcher('simple', timeout=5.0)
    assert isinstance(fetcher, SimpleFetcher)
    assert fetcher.timeout == 5.0

    with pytest.raises(ValueError, match='Unknown fetcher type'):
        create_fetcher('browser')
