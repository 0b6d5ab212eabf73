from types import MappingProxyType

from data.models import CustomerInfo

CUSTOMER_INFO = MappingProxyType({
    "valid": CustomerInfo("John", "Doe", "12345"),
    "international": CustomerInfo("Jane", "Smith", "SW1A 1AA"),
})

# step one 校验顺序：First Name -> Last Name -> Postal Code，只提示第一个缺失项
CHECKOUT_ERRORS = MappingProxyType({
    "missing_first_name": "Error: First Name is required",
    "missing_last_name": "Error: Last Name is required",
    "missing_postal_code": "Error: Postal Code is required",
})

CONFIRMATION_MESSAGES = MappingProxyType({
    "order_complete": "Thank you for your order!",
    "order_dispatched": "Your order has been dispatched, and will arrive just as fast as the pony can get there!",
})
