from __future__ import annotations

import logging

from selenium.common.exceptions import WebDriverException

from mfemap.config.schema import MapperConfig
from mfemap.core.exceptions import CaptureError
from mfemap.core.records import PageSnapshot
from mfemap.utils.wait import wait_until_stable

log = logging.getLogger(__name__)

RESOURCE_COUNT_SCRIPT = "return performance.getEntriesByType('resource').length;"

COLLECT_SCRIPT_URLS_SCRIPT = r"""
const loaded = performance.getEntriesByType("resource")
  .filter((entry) => entry.initiatorType === "script")
  .map((entry) => entry.name);
const declared = Array.from(document.querySelectorAll("script[src]"))
  .map((node) => node.src)
  .filter((src) => Boolean(src));
return { loaded: loaded, declared: declared };
"""

SERIALIZE_DOM_SCRIPT = """
return document.body ? document.body.innerHTML : document.documentElement.outerHTML;
"""


def merge_script_urls(loaded: list[str], declared: list[str]) -> list[str]:
    """Network-observed scripts first, then markup-declared ones, without repeats."""

    return list(dict.fromkeys([*loaded, *declared]))


class PageCapture:
    """Loads a page in a real browser and records what the analysis stages need."""

    def __init__(self, browser_session, config: MapperConfig) -> None:
        self.browser_session = browser_session
        self.config = config

    def capture(self, url: str) -> PageSnapshot:
        log.info("Launching %s browser...", self.config.browser)
        try:
            driver = self.browser_session.start()
        except WebDriverException as exc:
            raise CaptureError(f"Browser could not start: {exc.msg or exc}") from exc

        try:
            log.info("Navigating to: %s", url)
            driver.get(url)
            self._wait_for_network_idle(driver)

            log.info("Capturing script URLs...")
            scripts = driver.execute_script(COLLECT_SCRIPT_URLS_SCRIPT) or {}
            script_urls = merge_script_urls(scripts.get("loaded", []), scripts.get("declared", []))

            log.info("Capturing DOM...")
            return PageSnapshot(
                title=driver.title,
                url=driver.current_url,
                dom_source=driver.execute_script(SERIALIZE_DOM_SCRIPT) or "",
                script_urls=script_urls,
            )
        except WebDriverException as exc:
            raise CaptureError(f"Capture failed for {url}: {exc.msg or exc}") from exc
        finally:
            log.info("Closing browser...")
            driver.quit()

    def _wait_for_network_idle(self, driver) -> None:
        count = wait_until_stable(
            lambda: driver.execute_script(RESOURCE_COUNT_SCRIPT),
            timeout=self.config.settle_timeout_seconds,
        )
        log.debug("Resource count settled at %s", count)
