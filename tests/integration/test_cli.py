import pytest

from newsbrief import cli


def test_parser_defaults():
    args = cli.build_parser().parse_args(['--url', 'https://n.news.naver.com/a'])

    assert args.url == 'https://n.news.naver.com/a'
    assert args.output == 'markdown'
    assert args.save is None
    assert not args.no_ai


def test_save_without_directory():
    args = cli.build_parser().parse_args(['--url', 'https://n.news.naver.com/a', '--save'])
    assert args.save == ''


def test_read_urls_skips_comments_and_blanks(tmp_path):
    path = tmp_path / 'urls.txt'
    path.write_text('# Korean news\nhttps://n.news.naver.com/a\n\n  https://v.daum.net/b  \n', encoding='utf-8')

    assert cli.read_urls(str(path)) == ['https://n.news.naver.com/a', 'https://v.daum.net/b']


def test_build_config_applies_overrides(monkeypatch):
    monkeypatch.setenv('NEWSBRIEF_MAX_SENTENCES', '7')
    for variable in ('GROQ_KEY', 'GEMINI_KEY', 'OPENAI_API_KEY'):
        monkeypatch.delenv(variable, raising=False)

    args = cli.build_parser().parse_args(['--no-ai', '--max-sentences', '2'])
    config = cli.build_config(args)

    assert config.use_ai is False
    assert config.max_sentences == 2

    unchanged = cli.build_config(cli.build_parser().parse_args([]))
    assert unchanged.max_sentences == 7


def test_main_without_urls_exits(monkeypatch, mocker, tmp_path):
    monkeypatch.setattr('sys.argv', ['newsbrief'])
    mocker.patch('newsbrief.cli.setup_local_logging', return_value=tmp_path / 'run.log')
    mocker.patch('newsbrief.cli.logfire')

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1


def test_build_config_rejects_zero_sentences():
    args = cli.build_parser().parse_args(['--max-sentences', '0'])

    with pytest.raises(ValueError, match='--max-sentences'):
        cli.build_config(args)
