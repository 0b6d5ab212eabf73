import re
from decimal import Decimal


class CheckOutAssert:

    @staticmethod
    def price_format(label: str):
        """只关心 "<Label>: $<amount>" 格式，不关心具体 label 文案"""
        assert re.match(r"^[A-Za-z ]+: \$\d+\.\d{2}$", label), f"价格格式错误：{label}"

    @staticmethod
    def order_price(item_price: Decimal, tax: Decimal, order_price: Decimal):
        """订单总价 = 商品总价 + 税"""
        expect = item_price + tax
        assert order_price == expect, f"实际总金额{order_price}!=预期总金额{expect}"
