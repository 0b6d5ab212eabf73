import re
from typing import Union

from playwright.sync_api import Locator, Page, expect


class BasePage:
    """所有页面共用的导航与基础动作，作为成员嵌入各业务页面（组合而非继承）"""

    def __init__(self, page: Page):
        self.page = page

    # ========= 导航 =========
    def navigate(self, path: str = "/"):
        """相对 context 的 base_url 打开页面；站点不可达时 goto 直接抛错"""
        self.page.goto(path)

    def get_current_url(self) -> str:
        return self.page.url

    def wait_for_url(self, pattern: Union[str, re.Pattern]):
        """字符串按精确/glob匹配，re.compile 的正则按搜索匹配，超时抛 TimeoutError"""
        self.page.wait_for_url(pattern)

    # ========= 基础动作 =========
    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def text_or_empty(self, locator: Locator) -> str:
        """元素未渲染时返回空字符串，不等待、不抛错"""
        if locator.count() == 0:
            return ""
        return locator.text_content() or ""

    def get_texts(self, locator: Locator) -> list[str]:
        return [locator.nth(i).inner_text() for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator):
        expect(locator).to_be_visible()

    def expect_single(self, locator: Locator, name: str):
        """按名称定位的商品行必须唯一：0 个或多个都直接判失败"""
        expect(locator, f"商品名称'{name}'应唯一匹配一行").to_have_count(1)


def exact_text(value: str) -> re.Pattern:
    """整段文本精确匹配（区分大小写）"""
    return re.compile(rf"^\s*{re.escape(value)}\s*$")
