from types import MappingProxyType

from data.models import Product

# 商品名称与页面文本逐字节一致，locator 依赖精确匹配
PRODUCTS = MappingProxyType({
    "backpack": Product("backpack", "Sauce Labs Backpack"),
    "bike_light": Product("bike_light", "Sauce Labs Bike Light"),
    "bolt_t_shirt": Product("bolt_t_shirt", "Sauce Labs Bolt T-Shirt"),
    "fleece_jacket": Product("fleece_jacket", "Sauce Labs Fleece Jacket"),
    "onesie": Product("onesie", "Sauce Labs Onesie"),
    "red_t_shirt": Product("red_t_shirt", "Test.allTheThings() T-Shirt (Red)"),
})

PRODUCT_COUNT = 6

PRODUCT_SORT = MappingProxyType({
    "name_asc": "Name (A to Z)",
    "name_desc": "Name (Z to A)",
    "price_asc": "Price (low to high)",
    "price_desc": "Price (high to low)",
})
