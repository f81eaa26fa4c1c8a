from __future__ import annotations

from selenium import webdriver
from selenium.webdriver import ChromeOptions, FirefoxOptions

from mfemap.config.schema import MapperConfig


class BrowserSession:
    """Starts the configured browser through Selenium Manager."""

    def __init__(self, config: MapperConfig) -> None:
        self.config = config

    def start(self):
        browser = self.config.browser
        if browser == "chrome":
            driver = webdriver.Chrome(options=self.chrome_options())
        elif browser == "firefox":
            driver = webdriver.Firefox(options=self.firefox_options())
        else:
            raise ValueError(f"Unsupported browser: {browser}")
        driver.set_page_load_timeout(self.config.page_load_timeout_seconds)
        driver.implicitly_wait(0)
        return driver

    def chrome_options(self) -> ChromeOptions:
        options = ChromeOptions()
        if self.config.headless:
            options.add_argument("--headless=new")
        options.add_argument(f"--window-size={self.config.window_size}")
        return options

    def firefox_options(self) -> FirefoxOptions:
        options = FirefoxOptions()
        if self.config.headless:
            options.add_argument("-headless")
        width, _, height = self.config.window_size.partition(",")
        options.add_argument(f"--width={width.strip()}")
        options.add_argument(f"--height={height.strip()}")
        return options
