from newsbrief.core.extraction import NewsScraper

NAVER_URL = 'https://n.news.naver.com/mnews/article/001/0014000000'


def test_naver_article(make_fetcher, naver_html, naver_content):
    fetcher = make_fetcher(naver_html)

    result = NewsScraper(fetcher=fetcher).scrape(NAVER_URL)

    fetcher.fetch.assert_called_once_with(NAVER_URL)
    assert result.success
    assert result.site_key == 'naver'
    assert result.article is not None
    assert result.article.title == 'Test Title'
    assert result.article.content == naver_content


def test_unknown_publisher_uses_generic_extraction(make_fetcher, generic_html):
    result = NewsScraper(fetcher=make_fetcher(generic_html)).scrape('https://www.example.org/news/park')

    assert result.success
    assert result.site_key is None
    assert result.domain == 'example.org'
    assert result.article.title == 'Local Council Approves New Park'
    assert result.article.content.startswith('The city council voted on Tuesday')


def test_profile_miss_falls_back_to_generic(make_fetcher, generic_html):
    # A naver URL serving a page without any naver markup
    result = NewsScraper(fetcher=make_fetcher(generic_html)).scrape(NAVER_URL)

    assert result.success
    assert result.article.content.startswith('The city council voted on Tuesday')


def test_no_content_is_a_failed_result(make_fetcher):
    html = '<html><head><title>Empty page</title></head><body><p>Nothing here</p></body></html>'

    result = NewsScraper(fetcher=make_fetcher(html)).scrape(NAVER_URL)

    assert not result.success
    assert result.article is None
    assert result.failure_reason == 'content_not_found'
