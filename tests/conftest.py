import pytest

from settings import Settings


@pytest.fixture
def content_root(tmp_path):
    pages = tmp_path / 'en' / 'aws'
    pages.mkdir(parents=True)
    (pages / 'welcome.md').write_text('# Hi', encoding='utf-8')
    (pages / '_nav.md').write_text('- home', encoding='utf-8')
    (tmp_path / 'style.css').write_text('body{}', encoding='utf-8')
    return tmp_path


@pytest.fixture
def settings(content_root):
    return Settings(content_root=content_root)
