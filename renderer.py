"""Markdown page renderer with a read-through ledger.

Pages are looked up under <content_root>/<locale>/<platform>/<identifier>.md,
rendered together with the shared _nav.md and style.css, and memoized by
identifier for the lifetime of the renderer. Entries are never invalidated:
a page edited or deleted after its first render keeps serving the old result,
and a page that was missing stays missing.
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import ClassVar

import markdown

from layouts import PageContext, get_layout, render_page
from settings import Settings


class RendererError(Exception):
    pass


class PageReadError(RendererError):
    """A page, the nav or the stylesheet could not be read."""

    def __init__(self, path, reason):
        super().__init__(f'Could not read {path}: {reason}')
        self.path = path


@dataclass(frozen=True)
class Found:
    html: str
    found: ClassVar[bool] = True


@dataclass(frozen=True)
class NotFound:
    html: ClassVar[str] = ''
    found: ClassVar[bool] = False


class PageRenderer:

    def __init__(self, settings=None, template=render_page, convert=None):
        self.settings = settings or Settings()
        self.template = template
        self.convert = convert or self._markdown
        self._ledger = {}
        self._lock = threading.Lock()
        if template is render_page:
            # fail fast on a bad layout name instead of on the first request
            get_layout(self.settings.layout)

    def __contains__(self, identifier):
        return identifier in self._ledger

    def __len__(self):
        return len(self._ledger)

    def render(self, identifier: str) -> str:
        """Return the page HTML for identifier, or an empty string if it has no source file."""
        return self.resolve(identifier).html

    def resolve(self, identifier: str):
        with self._lock:
            if identifier in self._ledger:
                return self._ledger[identifier]

            path = self.settings.page_path(identifier)
            # os.path.exists reports any stat failure (too long, no access) as missing
            if not os.path.exists(path):
                logging.warning(f"No page for {identifier!r} at {path}")
                result = NotFound()
            else:
                logging.info(f"Rendering {identifier!r} from {path}")
                result = Found(self._build(path))

            self._ledger[identifier] = result
            return result

    def _build(self, path):
        body = self._read(path)
        nav = self._read(self.settings.nav_path)
        style = self._read(self.settings.style_path)

        context = PageContext(
            title=self.settings.title,
            style=style,
            nav_html=self.convert(nav),
            content_html=self.convert(body),
            layout=self.settings.layout,
        )
        return self.template(context)

    def _read(self, path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Failed to read {path}: {e}")
            raise PageReadError(path, e) from e

    def _markdown(self, text):
        return markdown.markdown(text, extensions=list(self.settings.markdown_extensions))
