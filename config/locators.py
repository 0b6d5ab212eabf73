# 选择器优先级：data-test 属性 > id > class > 可见文本（仅在没有稳定属性时使用）

LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
}

HEADER_LOCATORS = {
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车角标，0件商品时不渲染
}

INVENTORY_LOCATORS = {
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "add_product_button": "[data-test^='add-to-cart']",  # 商品行内 Add to cart 按钮
    "remove_product_button": "[data-test^='remove']",  # 已加购后按钮变为 Remove
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
}

CART_LOCATORS = {
    "cart_item": ".cart_item",  # 购物车商品行（cart / checkout-step-two 共用）
    "cart_item_name": "[data-test='inventory-item-name']",  # 行内商品名称
    "remove_product_button": "[data-test^='remove']",  # 行内 Remove 按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "container_error_msg": "[data-test='error']",  # Error: First Name is required
    "cancel_button": "[data-test='cancel']",  # 取消按钮（step one / step two 共用）
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    "products_price": "[data-test='subtotal-label']",  # Item total: $29.99
    "tax_price": "[data-test='tax-label']",  # Tax: $2.40
    "order_price": "[data-test='total-label']",  # Total: $32.39
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout-complete.html---------
    "complete_header": "[data-test='complete-header']",  # Thank you for your order!
    "complete_text": "[data-test='complete-text']",  # 订单已发货提示
    "back_home_button": "[data-test='back-to-products']",  # 返回商品列表
}
