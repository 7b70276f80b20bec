import logging
import re
from typing import Optional

from playwright.sync_api import Page, Locator, expect

from config.settings import SETTLE_TIMEOUT_MS


class BasePage:

    def __init__(self, page: Page, logger: Optional[logging.Logger] = None):
        self.page = page
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    # ========= 基础动作 =========
    def open(self, url: str):
        self.logger.debug(f"打开页面：{url}")
        self.page.goto(url)

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    # ========= 等待（条件等待，不用固定sleep） =========
    def wait_visible(self, locator: Locator):
        expect(locator).to_be_visible(timeout=SETTLE_TIMEOUT_MS)

    def wait_count(self, locator: Locator, count: int):
        expect(locator).to_have_count(count, timeout=SETTLE_TIMEOUT_MS)

    def wait_text(self, locator: Locator, pattern: str):
        expect(locator).to_have_text(re.compile(pattern), timeout=SETTLE_TIMEOUT_MS)

    def wait_checked(self, locator: Locator, checked: bool):
        expect(locator).to_be_checked(checked=checked, timeout=SETTLE_TIMEOUT_MS)
