"""Page layouts.

A layout turns a PageContext into a complete HTML document. The two shipped
layouts live in templates/ as Jinja templates:

  sidebar : content beside the nav, with viewport meta, source badge and analytics
  header  : nav in a header above the content
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'
# where a regular (non-editable) install puts the templates, see pyproject.toml data-files
INSTALLED_TEMPLATE_DIR = Path(sys.prefix) / 'share' / 'arc-docs' / 'templates'
TEMPLATE_DIRS = (TEMPLATE_DIR, INSTALLED_TEMPLATE_DIR)
LAYOUTS = ('sidebar', 'header')


class LayoutNotFound(LookupError):
    pass


@dataclass(frozen=True)
class PageContext:
    title: str
    style: str
    nav_html: str
    content_html: str
    layout: str = 'sidebar'


_env = Environment(
    loader=FileSystemLoader([str(d) for d in TEMPLATE_DIRS]),
    autoescape=select_autoescape(['html']),
)


def get_layout(name):
    try:
        return _env.get_template(f'{name}.html')
    except TemplateNotFound:
        raise LayoutNotFound(f'Unknown layout: {name!r}') from None


def render_page(context: PageContext) -> str:
    template = get_layout(context.layout)
    return template.render(
        title=context.title,
        style=context.style,
        nav=context.nav_html,
        content=context.content_html,
    )
