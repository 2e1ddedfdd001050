"""Static publisher tables: supported domains, site tokens and selector profiles."""

from types import MappingProxyType

from newsbrief.models.selectors import ByClass, ById, ByTag, SiteProfile

SUPPORTED_NEWS_SITES: MappingProxyType[str, str] = MappingProxyType(
    {
        'naver.com': '네이버 뉴스',
        'daum.net': '다음 뉴스',
        'chosun.com': '조선일보',
        'joongang.co.kr': '중앙일보',
        'donga.com': '동아일보',
        'hani.co.kr': '한겨레',
        'khan.co.kr': '경향신문',
        'hankyung.com': '한국경제',
        'mk.co.kr': '매일경제',
        'newsis.com': '뉴시스',
        'ytn.co.kr': 'YTN',
        'sbs.co.kr': 'SBS',
        'kbs.co.kr': 'KBS',
    }
)

# Checked in order, first contained token wins
SITE_TOKENS: tuple[str, ...] = (
    'naver',
    'daum',
    'chosun',
    'joongang',
    'donga',
    'hankyung',
    'hani',
    'khan',
    'newsis',
    'mk',
    'ytn',
    'sbs',
    'kbs',
)

SITE_PROFILES: MappingProxyType[str, SiteProfile] = MappingProxyType(
    {
        'naver': SiteProfile(
            site_key='naver',
            title_selectors=(
                ByClass(value='media_end_head_headline'),
                ById(value='title_area'),
                ByClass(value='end_tit'),
            ),
            content_selectors=(
                ById(value='dic_area'),
                ById(value='newsct_article'),
                ById(value='articleBodyContents'),
                ById(value='articeBody'),
            ),
        ),
        'daum': SiteProfile(
            site_key='daum',
            title_selectors=(ByClass(value='tit_view'),),
            content_selectors=(
                ByClass(value='article_view'),
                ById(value='harmonyContainer'),
            ),
        ),
        'chosun': SiteProfile(
            site_key='chosun',
            title_selectors=(
                ByClass(value='article-header__headline'),
                ById(value='news_title_text_id'),
            ),
            content_selectors=(
                ByClass(value='article-body'),
                ById(value='news_body_id'),
            ),
        ),
        'joongang': SiteProfile(
            site_key='joongang',
            title_selectors=(ByClass(value='headline'),),
            content_selectors=(ById(value='article_body'),),
        ),
        'donga': SiteProfile(
            site_key='donga',
            title_selectors=(ByClass(value='title'),),
            content_selectors=(
                ByClass(value='news_view'),
                ById(value='article_txt'),
                ByClass(value='article_txt'),
            ),
        ),
        'hankyung': SiteProfile(
            site_key='hankyung',
            title_selectors=(ByClass(value='headline'),),
            content_selectors=(
                ById(value='articletxt'),
                ByClass(value='article-body'),
            ),
        ),
        'hani': SiteProfile(
            site_key='hani',
            title_selectors=(
                ByClass(value='ArticleDetailView_title'),
                ByClass(value='title'),
            ),
            content_selectors=(
                ByClass(value='article-text'),
                ByClass(value='text'),
            ),
        ),
        'khan': SiteProfile(
            site_key='khan',
            title_selectors=(ByClass(value='headline'),),
            content_selectors=(
                ById(value='articleBody'),
                ByClass(value='art_body'),
            ),
        ),
        'newsis': SiteProfile(
            site_key='newsis',
            title_selectors=(ByClass(value='tit title_area'), ByClass(value='tit')),
            content_selectors=(
                ByClass(value='viewer'),
                ById(value='textBody'),
            ),
        ),
        'mk': SiteProfile(
            site_key='mk',
            title_selectors=(ByClass(value='news_ttl'),),
            content_selectors=(
                ByClass(value='news_cnt_detail_wrap'),
                ById(value='article_body'),
            ),
        ),
        'ytn': SiteProfile(
            site_key='ytn',
            title_selectors=(ByClass(value='news_title'), ByTag(value='h2')),
            content_selectors=(
                ByClass(value='paragraph'),
                ById(value='CmAdContent'),
            ),
        ),
        'sbs': SiteProfile(
            site_key='sbs',
            title_selectors=(ById(value='news-title'), ByClass(value='article_main_tit')),
            content_selectors=(
                ByClass(value='text_area'),
                ByClass(value='main_text'),
            ),
        ),
        'kbs': SiteProfile(
            site_key='kbs',
            title_selectors=(ByClass(value='headline-title'), ByClass(value='tit-s')),
            content_selectors=(
                ById(value='cont_newstext'),
                ByClass(value='detail-body'),
            ),
        ),
    }
)
