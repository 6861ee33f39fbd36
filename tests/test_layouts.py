import sys
from pathlib import Path

import pytest

from layouts import (
    LAYOUTS,
    TEMPLATE_DIR,
    TEMPLATE_DIRS,
    LayoutNotFound,
    PageContext,
    get_layout,
    render_page,
)


def make_context(**kwargs):
    values = dict(
        title='arc',
        style='body{}',
        nav_html='<ul><li>home</li></ul>',
        content_html='<h1>Hi</h1>',
    )
    values.update(kwargs)
    return PageContext(**values)


def test_all_layouts_exist():
    for name in LAYOUTS:
        get_layout(name)


def test_unknown_layout():
    with pytest.raises(LayoutNotFound):
        render_page(make_context(layout='missing'))


def test_sidebar_layout():
    html = render_page(make_context(layout='sidebar'))
    assert '<title>arc</title>' in html
    assert 'name="viewport"' in html
    assert '<style type="text/css">body{}</style>' in html
    assert '<section class="content"><h1>Hi</h1></section>' in html
    assert '<nav><ul><li>home</li></ul></nav>' in html
    assert 'prism/1.6.0/prism.min.js' in html
    assert 'github-corner' in html
    assert "ga('create', 'UA-74655805-3', 'auto')" in html
    # content comes before the nav
    assert html.index('<h1>Hi</h1>') < html.index('<nav>')


def test_header_layout():
    html = render_page(make_context(layout='header'))
    assert '<header>\n    <nav><ul><li>home</li></ul></nav>\n  </header>' in html
    assert 'prism/1.6.0/prism.min.js' in html
    assert 'name="viewport"' not in html
    assert 'github-corner' not in html
    assert 'google-analytics' not in html


def test_title_is_escaped():
    html = render_page(make_context(title='<b>docs</b>'))
    assert '<title>&lt;b&gt;docs&lt;/b&gt;</title>' in html


def test_html_parts_are_not_escaped():
    html = render_page(make_context(content_html='<p>a &amp; b</p>'))
    assert '<p>a &amp; b</p>' in html


def test_installed_template_dir_is_searched():
    assert TEMPLATE_DIRS[0] == TEMPLATE_DIR
    assert TEMPLATE_DIRS[1] == Path(sys.prefix) / 'share' / 'arc-docs' / 'templates'


def test_every_layout_is_shipped_as_data_file():
    pyproject = (TEMPLATE_DIR.parent / 'pyproject.toml').read_text(encoding='utf-8')
    assert '"share/arc-docs/templates" = [' in pyproject
    for name in LAYOUTS:
        assert f'"templates/{name}.html"' in pyproject
