from playwright.sync_api import Locator, Page, expect

from config.locators import CART_LOCATORS, CHECKOUT_LOCATORS
from pages.base_page import BasePage


class CheckOutPage:
    """
    结算流程：Information(step one) -> Overview(step two) -> Complete
    step one 缺少必填项时停留在本页并展示错误提示
    """

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)

    # ================= step one 收货人信息 =================
    def first_name_input(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["firstName_input"])

    def last_name_input(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["lastName_input"])

    def postal_code_input(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["postalCode_input"])

    def error_message(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["container_error_msg"])  # 收货人未填写点击continue的错误提示

    def continue_button(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["continue_button"])

    def cancel_button(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["cancel_button"])

    # ================= step two 订单确认 =================
    def item_total(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["products_price"])  # 商品总价格

    def tax(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["tax_price"])  # 税费

    def total(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["order_price"])  # 订单价格

    def finish_button(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["finish_button"])

    def overview_item_names(self) -> Locator:
        return self.page.locator(CART_LOCATORS["cart_item"]).locator(CART_LOCATORS["cart_item_name"])

    # ================= complete 完成页 =================
    def confirmation_header(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["complete_header"])

    def confirmation_message(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["complete_text"])

    def back_home_button(self) -> Locator:
        return self.page.locator(CHECKOUT_LOCATORS["back_home_button"])

    # ========== 页面行为 ==========
    def fill_first_name(self, first_name: str):
        self.base.fill(self.first_name_input(), first_name)

    def fill_last_name(self, last_name: str):
        self.base.fill(self.last_name_input(), last_name)

    def fill_postal_code(self, postal_code: str):
        self.base.fill(self.postal_code_input(), postal_code)

    def fill_customer_info(self, first_name: str, last_name: str, postal_code: str):
        """填写收货人信息并提交"""
        self.fill_first_name(first_name)
        self.fill_last_name(last_name)
        self.fill_postal_code(postal_code)
        self.click_continue()

    def click_continue(self):
        """点击Checkout-step-one页面continue按钮，提交当前已填写内容"""
        self.base.click(self.continue_button())

    def click_cancel(self):
        """点击Checkout-step-one页面cancel按钮，返回购物车"""
        self.base.click(self.cancel_button())

    def cancel_order(self):
        """点击Checkout-step-two页面cancel按钮，返回商品列表"""
        self.base.click(self.cancel_button())

    def finish_order(self):
        self.base.click(self.finish_button())

    def back_to_home(self):
        self.base.click(self.back_home_button())

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.base.text_or_empty(self.error_message())

    # 以下三个价格均返回页面原始文案，如 "Item total: $29.99"，需要数值时用 parse_money
    def get_item_total(self) -> str:
        return self.base.text(self.item_total())

    def get_tax(self) -> str:
        return self.base.text(self.tax())

    def get_total(self) -> str:
        return self.base.text(self.total())

    def get_overview_item_names(self) -> list[str]:
        return self.base.get_texts(self.overview_item_names())

    def get_confirmation_header(self) -> str:
        return self.base.text_or_empty(self.confirmation_header())

    def get_confirmation_message(self) -> str:
        return self.base.text_or_empty(self.confirmation_message())

    # ========== 校验 ==========
    def assert_error_visible(self):
        expect(self.error_message()).to_be_visible()

    def assert_error_message(self, expected: str):
        expect(self.error_message()).to_contain_text(expected)

    def assert_confirmation_header(self, expected: str):
        expect(self.confirmation_header()).to_contain_text(expected)

    def assert_confirmation_message(self, expected: str):
        expect(self.confirmation_message()).to_contain_text(expected)

    def assert_on_complete_page(self):
        expect(self.confirmation_header()).to_be_visible()
        expect(self.back_home_button()).to_be_visible()
