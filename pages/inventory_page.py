from decimal import Decimal

from playwright.sync_api import Locator, Page, expect

from config.locators import HEADER_LOCATORS, INVENTORY_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage, exact_text
from utils.common_utils import parse_money


class InventoryPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)

    # ================= 元素定位 =================
    def item_product(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item_product"])  # 商品列表

    def product_row(self, name: str) -> Locator:
        """商品名称完全等于 name 的商品行"""
        return self.item_product().filter(
            has=self.page.locator(INVENTORY_LOCATORS["item_product_name"], has_text=exact_text(name)))

    def add_to_cart_button(self, name: str) -> Locator:
        return self.product_row(name).locator(INVENTORY_LOCATORS["add_product_button"])

    def remove_button(self, name: str) -> Locator:
        return self.product_row(name).locator(INVENTORY_LOCATORS["remove_product_button"])

    def cart_icon(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["shopping_cart_link"])

    def cart_badge(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["shopping_cart_badge"])

    def product_sort_type(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["product_sort_type"])

    # ================= 页面行为 =================
    def open_inventory(self):
        self.base.navigate(URLS[ENV]["inventory"])
        self.base.wait_visible(self.item_product().first)

    def add_item(self, name: str):
        self.base.expect_single(self.product_row(name), name)
        self.base.click(self.add_to_cart_button(name))

    def remove_item(self, name: str):
        self.base.expect_single(self.product_row(name), name)
        self.base.click(self.remove_button(name))

    def go_to_cart(self):
        self.base.click(self.cart_icon())

    # 选择排序方式
    def sort_by(self, label: str):
        self.product_sort_type().select_option(label=label)

    # ================= 数据获取 =================
    def get_cart_count(self) -> int:
        # 购物车为空时角标不渲染，视为0
        if not self.cart_badge().is_visible():
            return 0
        return int(self.base.text(self.cart_badge()))

    def is_item_in_cart(self, name: str) -> bool:
        return self.remove_button(name).is_visible()

    def get_remove_count(self) -> int:
        """当前处于 Remove 状态（已加入购物车）的商品数"""
        return self.base.get_count(self.page.locator(INVENTORY_LOCATORS["remove_product_button"]))

    def get_inventory_item_count(self) -> int:
        return self.base.get_count(self.item_product())

    def get_product_names(self) -> list[str]:
        return self.base.get_texts(self.page.locator(INVENTORY_LOCATORS["item_product_name"]))

    def get_product_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in
                self.base.get_texts(self.page.locator(INVENTORY_LOCATORS["item_product_price"]))]

    # ========== 基础校验 ==========
    def assert_cart_count(self, expected: int):
        if expected == 0:
            expect(self.cart_badge()).to_be_hidden()
        else:
            expect(self.cart_badge()).to_have_text(str(expected))

    def assert_item_can_be_added(self, name: str):
        expect(self.add_to_cart_button(name)).to_be_visible()
