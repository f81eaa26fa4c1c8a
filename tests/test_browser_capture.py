from __future__ import annotations

import pytest
from selenium.common.exceptions import WebDriverException

from mfemap.core.browser import BrowserSession
from mfemap.core.capture import PageCapture
from mfemap.core.detector import detect_mfe
from tests.helpers import StubBrowserSession

PAGE = """<!doctype html>
<html>
  <head><title>Federated shop</title></head>
  <body>
    <nav><a href="#home">Home</a></nav>
    <div class="remote-cart"><button id="buy">Buy</button></div>
    <script src="remoteEntry.js"></script>
  </body>
</html>
"""


@pytest.fixture()
def live_session(mapper_config):
    try:
        driver = BrowserSession(mapper_config).start()
    except WebDriverException as exc:
        pytest.skip(f"WebDriver could not start for {mapper_config.browser}: {exc}")
    return StubBrowserSession(driver)


@pytest.mark.integration
def test_capture_of_local_page(tmp_path, mapper_config, live_session):
    page_path = tmp_path / "index.html"
    page_path.write_text(PAGE, encoding="utf-8")
    (tmp_path / "remoteEntry.js").write_text("window.remote = true;", encoding="utf-8")

    snapshot = PageCapture(live_session, mapper_config).capture(page_path.as_uri())

    assert snapshot.title == "Federated shop"
    assert snapshot.url.startswith("file://")
    assert 'id="buy"' in snapshot.dom_source
    assert any(url.endswith("/remoteEntry.js") for url in snapshot.script_urls)
    assert detect_mfe(snapshot).shell
