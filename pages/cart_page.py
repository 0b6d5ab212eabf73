from playwright.sync_api import Locator, Page, expect

from config.locators import CART_LOCATORS, HEADER_LOCATORS
from pages.base_page import BasePage, exact_text


class CartPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)

    # ================= 元素定位 =================
    def cart_items(self) -> Locator:
        return self.page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行

    def cart_item(self, name: str) -> Locator:
        return self.cart_items().filter(
            has=self.page.locator(CART_LOCATORS["cart_item_name"], has_text=exact_text(name)))

    def remove_button(self, name: str) -> Locator:
        return self.cart_item(name).locator(CART_LOCATORS["remove_product_button"])

    def cart_badge(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["shopping_cart_badge"])  # 购物车显示商品数量

    def checkout_button(self) -> Locator:
        return self.page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮

    def continue_shopping_button(self) -> Locator:
        return self.page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮

    # ================= 页面行为 =================
    def begin_checkout(self):
        self.base.click(self.checkout_button())

    def remove_item(self, name: str):
        self.base.expect_single(self.cart_item(name), name)
        self.base.click(self.remove_button(name))

    def continue_shopping(self):
        self.base.click(self.continue_shopping_button())

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        return self.base.get_count(self.cart_items())

    def get_cart_badge_count(self) -> int:
        # 获取购物车显示的商品数字，角标不存在即为0
        if not self.cart_badge().is_visible():
            return 0
        return int(self.base.text(self.cart_badge()))

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def get_cart_item_names(self) -> list[str]:
        """按DOM顺序返回购物车商品名称，不保证与加购顺序一致"""
        return self.base.get_texts(self.cart_items().locator(CART_LOCATORS["cart_item_name"]))

    # ================= 基础验证 =================
    def assert_item_in_cart(self, name: str):
        expect(self.cart_item(name)).to_be_visible()

    def assert_item_not_in_cart(self, name: str):
        expect(self.cart_item(name)).not_to_be_visible()

    def assert_cart_item_count(self, expected: int):
        expect(self.cart_items()).to_have_count(expected)

    def assert_cart_badge_count(self, expected: int):
        if expected == 0:
            expect(self.cart_badge()).to_be_hidden()
        else:
            expect(self.cart_badge()).to_have_text(str(expected))
