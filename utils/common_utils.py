import re
from decimal import Decimal

"""字符串中获取价格"""

_MONEY = re.compile(r"\$(\d+(?:\.\d+)?)")


def parse_money(text: str) -> Decimal:
    """
    'Item total: $39.98' -> Decimal('39.98')
    '$29.99' -> Decimal('29.99')
    """
    match = _MONEY.search(text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1))
