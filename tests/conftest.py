"""Shared fixtures: a fake documentation site served through httpx.MockTransport."""

import json
import logging

import httpx
import pytest
from bs4 import BeautifulSoup

from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.mcp_server.config import Config
from ui_components_server.mcp_server.tools import UIComponentsTools
from ui_components_server.models.config.selectors import SelectorConfig
from ui_components_server.models.config.server import ServerConfig

BASE_URL = "https://ui.example.com"

SAMPLE_INDEX = {
    "v": 5,
    "entries": {
        "forms-button--docs": {
            "id": "forms-button--docs",
            "type": "docs",
            "title": "Forms/Button",
            "name": "Docs",
        },
        "forms-button--primary": {
            "id": "forms-button--primary",
            "type": "story",
            "title": "Forms/Button",
            "name": "Primary",
            "componentPath": "./src/components/Button.vue",
        },
        "forms-button--secondary": {
            "id": "forms-button--secondary",
            "type": "story",
            "title": "Forms/Button",
            "name": "Secondary",
            "componentPath": "./src/components/ButtonOther.vue",
        },
        "forms-inputs-text-field--default": {
            "id": "forms-inputs-text-field--default",
            "type": "story",
            "title": "Forms/Inputs/TextField",
            "name": "Default",
            "componentPath": "./src/components/TextField.vue",
        },
        "introduction--page": {
            "id": "introduction--page",
            "type": "story",
            "title": "Introduction",
            "name": "Page",
        },
        "layout-card--basic": {
            "id": "layout-card--basic",
            "type": "story",
            "title": "Layout/Card",
            "name": "Basic",
        },
    },
}

BUTTON_DOCS_HTML = """
<html><body>
  <nav><p>Navigation text</p></nav>
  <div class="sbdocs sbdocs-content">
    <h1>Button</h1>
    <p>  Buttons trigger actions and events.  </p>
    <p>Second paragraph.</p>
    <pre><code class="language-vue">&lt;Button label="Save" /&gt;</code></pre>
    <pre><code class="language-ts">const size: Size = 'large';</code></pre>
    <pre><code>npm install @acme/ui</code></pre>
    <table class="props">
      <thead><tr><th>Name</th><th>Type</th><th>Description</th><th>Required</th></tr></thead>
      <tbody>
        <tr><td>label</td><td>string</td><td>Button text</td><td>true</td></tr>
        <tr><td>size</td><td>'small' | 'large'</td><td>Button size</td></tr>
        <tr><td>broken</td></tr>
      </tbody>
    </table>
    <div class="api-reference">Emits click events.</div>
  </div>
</body></html>
"""

TOKENS_HTML = """
<html><body>
  <section class="colors">
    <div class="color-item"><span class="color-name">primary</span><span class="color-value">#0055ff</span></div>
    <div class="swatch" style="background-color: rgb(255, 0, 0); border: 1px solid">
      <span class="name">danger</span>
    </div>
    <div data-color="#00aa00"><span class="name">success</span></div>
    <div class="color-item"><span class="color-value">#999</span></div>
    <div class="color-item"><span class="color-name">orphan</span></div>
  </section>
  <section id="spacing">
    <div class="spacing-item"><span class="spacing-name">sm</span><span class="spacing-value">4px</span></div>
    <div data-spacing-value="8"><span class="name">md</span><span class="value">8px</span></div>
    <div class="spacing-item"><span class="spacing-name">lg</span></div>
  </section>
  <section data-typography="true">
    <div class="typography-item" style="font-size: 32px; font-weight: 700"><span class="typography-name">heading</span></div>
    <div class="typography-item"><span class="name">body</span><span class="font-size">16px</span></div>
    <div class="typography-item"><span class="name">empty</span></div>
  </section>
</body></html>
"""


def _route_key(request: httpx.Request) -> str:
    # Storybook links route through ?path=...; everything else by URL path
    return request.url.params.get("path") or request.url.path


class FakeSite:
    """Records requests and serves canned responses keyed by route."""

    def __init__(self, routes: dict[str, tuple[int, str]]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = _route_key(request)
        if key not in self.routes:
            return httpx.Response(404, text="Not Found")
        status, body = self.routes[key]
        return httpx.Response(status, text=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def hits(self, key: str) -> int:
        return sum(1 for request in self.requests if _route_key(request) == key)


@pytest.fixture
def default_routes() -> dict[str, tuple[int, str]]:
    return {
        "/index.json": (200, json.dumps(SAMPLE_INDEX)),
        "/docs/forms-button--docs": (200, BUTTON_DOCS_HTML),
        "/design-tokens": (200, TOKENS_HTML),
    }


@pytest.fixture
def make_site():
    def _make(routes: dict[str, tuple[int, str]]) -> FakeSite:
        return FakeSite(routes)

    return _make


@pytest.fixture
def site(make_site, default_routes) -> FakeSite:
    return make_site(default_routes)


@pytest.fixture
def settings() -> ServerConfig:
    return ServerConfig(base_url=BASE_URL, cache_ttl=0, _env_file=None)


@pytest.fixture
def make_client(settings):
    def _make(site: FakeSite, **overrides) -> DocsSiteClient:
        config = settings.model_copy(update=overrides) if overrides else settings
        return DocsSiteClient(config, transport=site.transport)

    return _make


@pytest.fixture
def make_tools(settings):
    def _make(site: FakeSite, **overrides) -> UIComponentsTools:
        server_settings = settings.model_copy(update=overrides)
        config = Config(settings=server_settings, selectors=SelectorConfig())
        client = DocsSiteClient(server_settings, transport=site.transport)
        return UIComponentsTools(client, config)

    return _make


@pytest.fixture
def tools(make_tools, site) -> UIComponentsTools:
    return make_tools(site)


@pytest.fixture
def button_doc() -> BeautifulSoup:
    return BeautifulSoup(BUTTON_DOCS_HTML, "html.parser")


@pytest.fixture
def tokens_doc() -> BeautifulSoup:
    return BeautifulSoup(TOKENS_HTML, "html.parser")


@pytest.fixture
def sample_index() -> dict:
    return json.loads(json.dumps(SAMPLE_INDEX))


@pytest.fixture(autouse=True)
def restore_root_logger():
    # setup_logging replaces root handlers; CliRunner streams close after each invoke
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
