from playwright.sync_api import Locator, Page, expect

from config.locators import LOGIN_LOCATORS
from config.pages import ENV, URLS
from pages.base_page import BasePage


class LoginPage:
    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)

    # ================= 元素定位 =================
    def username_input(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框

    def password_input(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框

    def login_button(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮

    def error_message(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息

    # ================= 页面行为 =================
    def open_login(self):
        self.base.navigate(URLS[ENV]["login"])
        self.base.wait_visible(self.username_input())

    def login(self, username: str, password: str):
        """填写账号密码并提交；成功跳转或报错由调用方另行判断"""
        self.base.fill(self.username_input(), username)
        self.base.fill(self.password_input(), password)
        self.base.click(self.login_button())

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.base.text_or_empty(self.error_message())

    def is_on_login_page(self) -> bool:
        return self.login_button().is_visible()

    # ========== 登录校验 ==========
    def assert_login_error(self):
        expect(self.error_message()).to_be_visible()

    def assert_error_message(self, expected: str):
        expect(self.error_message()).to_contain_text(expected)
