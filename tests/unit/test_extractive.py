from collections import Counter

import pytest

from newsbrief.core.summarization import extractive_summary
from newsbrief.core.summarization.extractive import build_word_frequencies, score_sentence, split_sentences
from newsbrief.models.results import Sentence

SEMICONDUCTOR_SENTENCES = [
    '반도체 수출이 크게 증가하며 반도체 산업이 회복세를 보였다',
    '오늘 서울의 날씨는 맑고 기온은 평년보다 다소 높았다',
    '정부는 반도체 산업 지원을 위한 새로운 반도체 정책을 발표했다',
    '한편 주말에는 많은 시민들이 공원을 찾아 휴식을 즐겼다',
    '전문가들은 반도체 수출 증가가 당분간 이어질 것으로 전망했다',
    '지역 축제에는 다양한 먹거리와 공연이 준비되어 있었다',
    '교통 당국은 연휴 기간 고속도로 정체를 예상한다고 밝혔다',
]


def _content(sentences):
    return '. '.join(sentences) + '.'


def test_split_sentences_drops_noise():
    content = (
        '첫 번째 문장은 충분히 길게 작성되었습니다. 짧다! '
        '2024 01 15 12 30 45 00. ⓒ 연합뉴스 무단전재 및 재배포 금지. '
        '두 번째 문장도 충분히 길게 작성되었습니다?!'
    )
    assert split_sentences(content) == [
        '첫 번째 문장은 충분히 길게 작성되었습니다',
        '두 번째 문장도 충분히 길게 작성되었습니다',
    ]


def test_short_input_returns_all_sentences_in_order():
    content = '첫 번째 문장은 충분히 길게 작성되었습니다. 두 번째 문장도 충분히 길게 작성되었습니다! 짧다.'
    assert extractive_summary(content, max_sentences=5) == (
        '첫 번째 문장은 충분히 길게 작성되었습니다. 두 번째 문장도 충분히 길게 작성되었습니다.'
    )


def test_selects_keyword_dense_sentences_in_original_order():
    summary = extractive_summary(_content(SEMICONDUCTOR_SENTENCES), max_sentences=3)

    assert summary == _content([SEMICONDUCTOR_SENTENCES[0], SEMICONDUCTOR_SENTENCES[2], SEMICONDUCTOR_SENTENCES[4]])


def test_returns_exactly_max_sentences():
    for max_sentences in (1, 2, 4, 6):
        summary = extractive_summary(_content(SEMICONDUCTOR_SENTENCES), max_sentences=max_sentences)
        selected = summary.removesuffix('.').split('. ')

        assert len(selected) == max_sentences
        indices = [SEMICONDUCTOR_SENTENCES.index(sentence) for sentence in selected]
        assert indices == sorted(indices)


def test_no_qualifying_sentences_returns_empty():
    assert extractive_summary('짧다. 너무 짧다.') == ''
    assert extractive_summary('') == ''


def test_max_sentences_must_be_positive():
    with pytest.raises(ValueError):
        extractive_summary(_content(SEMICONDUCTOR_SENTENCES), max_sentences=0)


def test_word_frequencies_skip_stop_words_and_single_characters():
    frequencies = build_word_frequencies('그리고 반도체 반도체 A 수출 밝혔다')
    assert frequencies['반도체'] == 2
    assert frequencies['수출'] == 1
    assert '그리고' not in frequencies
    assert '밝혔다' not in frequencies
    assert 'a' not in frequencies


def test_score_combines_keyword_density_and_position():
    # 6 tokens, frequencies 3 + 1, so density 4/6; index 3 of 10 decays by 0.3 * 3/10
    sentence = Sentence(text='alpha beta gamma delta epsilon zeta', original_index=3)
    frequencies = Counter({'alpha': 3, 'beta': 1})

    assert score_sentence(sentence, 10, frequencies) == pytest.approx(4 / 6 * 0.91)


def test_first_sentence_has_no_position_decay():
    sentence = Sentence(text='alpha beta gamma delta epsilon zeta', original_index=0)
    assert score_sentence(sentence, 10, Counter({'alpha': 6})) == pytest.approx(1.0)


@pytest.mark.parametrize('length, factor', [(30, 0.7), (31, 1.0), (199, 1.0), (200, 0.7)])
def test_length_factor_boundaries(length, factor):
    text = 'a' * length
    sentence = Sentence(text=text, original_index=0)

    assert score_sentence(sentence, 5, Counter({text: 2})) == pytest.approx(2.0 * factor)


def test_sentence_without_tokens_scores_zero():
    assert score_sentence(Sentence(text='!!! --- ...', original_index=0), 1, Counter()) == 0.0


def test_equal_scores_keep_earlier_sentences(mocker):
    mocker.patch('newsbrief.core.summarization.extractive.score_sentence', return_value=1.0)
    sentences = [f'동점 문장 번호 {index}번은 충분히 긴 문장입니다' for index in range(6)]

    summary = extractive_summary(_content(sentences), max_sentences=2)

    assert summary == _content(sentences[:2])
