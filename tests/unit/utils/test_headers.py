from newsbrief.utils.headers import HeaderGenerator, UserAgentRotator


def test_chrome_windows_user_agent():
    user_agent = UserAgentRotator.get_chrome_windows()
    assert 'Chrome' in user_agent
    assert 'Windows' in user_agent
    assert 'Edg' not in user_agent


def test_headers_prefer_korean():
    headers = HeaderGenerator.generate_headers(user_agent=UserAgentRotator.get_chrome_windows())

    assert headers['Accept-Language'] == 'ko-KR,ko;q=0.9,en;q=0.8'
    assert headers['Sec-Fetch-Site'] == 'none'
    assert 'Referer' not in headers


def test_firefox_headers_have_no_fetch_metadata():
    firefox = next(ua for ua in UserAgentRotator.USER_AGENTS if 'Firefox' in ua)
    headers = HeaderGenerator.generate_headers(user_agent=firefox, referer='https://news.naver.com')

    assert 'Sec-Fetch-Site' not in headers
    assert headers['Referer'] == 'https://news.naver.com'
