from __future__ import annotations

from selenium.common.exceptions import WebDriverException

from mfemap.core.capture import COLLECT_SCRIPT_URLS_SCRIPT, RESOURCE_COUNT_SCRIPT, SERIALIZE_DOM_SCRIPT
from mfemap.core.records import MfeAnalysis, MfeInfo, PageSnapshot
from mfemap.utils.dom import SoupDocument, SoupNode, parse_html


def analysis_for(*names: str, shell: str = "https://shell.com") -> MfeAnalysis:
    return MfeAnalysis(
        shell=shell,
        mfes=[MfeInfo(name=name, scripts=[f"https://{name}.example/remoteEntry.js"]) for name in names],
    )


def parse_one(markup: str, selector: str) -> tuple[SoupDocument, SoupNode]:
    document = parse_html(markup)
    matches = document.select(selector)
    assert matches, f"{selector!r} matched nothing in {markup!r}"
    return document, matches[0]


def node_for(markup: str, selector: str | None = None) -> SoupNode:
    _, node = parse_one(markup, selector or "*")
    return node


def snapshot_for(dom: str, script_urls: list[str], url: str = "http://localhost:3000/") -> PageSnapshot:
    return PageSnapshot(title="Demo", url=url, dom=dom, scriptUrls=script_urls)


class FakeDriver:
    """Answers the capture scripts without a browser."""

    def __init__(
        self,
        *,
        title: str = "Demo",
        current_url: str = "http://localhost:3000/",
        dom: str = "<button>Go</button>",
        loaded: list[str] | None = None,
        declared: list[str] | None = None,
        fail_on_get: bool = False,
    ) -> None:
        self.title = title
        self.current_url = current_url
        self.dom = dom
        self.loaded = loaded or []
        self.declared = declared or []
        self.fail_on_get = fail_on_get
        self.visited: list[str] = []
        self.quit_called = False

    def get(self, url: str) -> None:
        if self.fail_on_get:
            raise WebDriverException("net::ERR_NAME_NOT_RESOLVED")
        self.visited.append(url)

    def execute_script(self, script: str):
        if script == RESOURCE_COUNT_SCRIPT:
            return len(self.loaded)
        if script == COLLECT_SCRIPT_URLS_SCRIPT:
            return {"loaded": list(self.loaded), "declared": list(self.declared)}
        if script == SERIALIZE_DOM_SCRIPT:
            return self.dom
        raise AssertionError(f"Unexpected script: {script[:40]}")

    def quit(self) -> None:
        self.quit_called = True


class StubBrowserSession:
    """Hands out a prepared driver, or fails the way Selenium Manager would."""

    def __init__(self, driver: FakeDriver | None = None, error: Exception | None = None) -> None:
        self.driver = driver
        self.error = error

    def start(self):
        if self.error is not None:
            raise self.error
        return self.driver
