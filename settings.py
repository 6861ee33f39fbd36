"""Configuration for the docs renderer and its Flask app."""

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _env_bool(value):
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    content_root: Path = BASE_DIR / 'docs'
    locale: str = 'en'
    platform: str = 'aws'
    title: str = 'arc'
    layout: str = 'sidebar'
    markdown_extensions: tuple = ('fenced_code', 'tables')

    host: str = '0.0.0.0'
    port: int = 5000
    debug: bool = False

    @property
    def pages_dir(self):
        return Path(self.content_root) / self.locale / self.platform

    @property
    def nav_path(self):
        return self.pages_dir / '_nav.md'

    @property
    def style_path(self):
        return Path(self.content_root) / 'style.css'

    def page_path(self, identifier):
        # identifier is joined as-is, no sanitization
        return self.pages_dir / f'{identifier}.md'

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from DOCS_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        overrides = {}
        if env.get('DOCS_CONTENT_ROOT'):
            overrides['content_root'] = Path(env['DOCS_CONTENT_ROOT'])
        if env.get('DOCS_TITLE'):
            overrides['title'] = env['DOCS_TITLE']
        if env.get('DOCS_LAYOUT'):
            overrides['layout'] = env['DOCS_LAYOUT']
        if env.get('DOCS_HOST'):
            overrides['host'] = env['DOCS_HOST']
        if env.get('DOCS_PORT'):
            overrides['port'] = int(env['DOCS_PORT'])
        if env.get('DOCS_DEBUG'):
            overrides['debug'] = _env_bool(env['DOCS_DEBUG'])
        return cls(**overrides)
