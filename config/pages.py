import os

"""环境与页面URL配置：ENV 选择环境，BASE_URL 可整体覆盖"""

ENV = os.getenv("ENV", "prod")

URLS = {
    "prod": {
        "base": "https://www.saucedemo.com/",
        "login": "/",
        "inventory": "/inventory.html",
    },
}

BASE_URL = os.getenv("BASE_URL", URLS[ENV]["base"])

# wait_for_url 使用的匹配规则（glob），不关心域名
URL_PATTERNS = {
    "inventory": "**/inventory.html",
    "cart": "**/cart.html",
    "checkout_step_one": "**/checkout-step-one.html",
    "checkout_step_two": "**/checkout-step-two.html",
    "checkout_complete": "**/checkout-complete.html",
}
