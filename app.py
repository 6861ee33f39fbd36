from flask import Flask
import logging

from renderer import PageReadError, PageRenderer
from settings import Settings

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def path_to_identifier(path):
    # /guides/http -> guides-http, / -> index
    identifier = path.strip('/').replace('/', '-')
    return identifier or 'index'


def create_app(settings=None, renderer=None):
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config['DOCS_SETTINGS'] = settings
    app.extensions['page_renderer'] = renderer or PageRenderer(settings)

    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def view_page(path):
        identifier = path_to_identifier(path)
        result = app.extensions['page_renderer'].resolve(identifier)
        if not result.found:
            return "Page not found", 404
        return result.html, 200, {'Content-Type': 'text/html; charset=utf-8'}

    @app.errorhandler(PageReadError)
    def page_read_error(e):
        logging.error(f"Page read failed: {e}")
        return "Page could not be read", 500

    return app


app = create_app()

if __name__ == '__main__':
    config = app.config['DOCS_SETTINGS']
    app.run(host=config.host, port=config.port, debug=config.debug)
