STORE_LOCATORS = {
    "products_container": "div.sc-uhudcz-0.iZZGui",  # 商品列表容器
    "product_card": "div[tabindex='1']",  # 单商品卡片
    "size_filter": "label:has(input[data-testid='checkbox'][value='{size}'])",  # 尺码筛选
    "size_filter_input": "input[data-testid='checkbox'][value='{size}']",  # 尺码筛选checkbox
}

CART_LOCATORS = {
    "cart_button": "button:has(div[class='sc-1h98xa9-2 fGgnoG'])",  # 打开购物车按钮
    "close_cart_button": "X",  # 关闭购物车按钮（role=button, name）
    "cart_item": "div.sc-11uohgb-0.hDmOrM",  # 购物车商品行
    "cart_item_price": "div.sc-11uohgb-4 p",  # 商品行价格
    "cart_item_quantity": "p:has-text('Quantity:')",  # 商品行数量
    "plus_button": "button:has-text('+')",  # 数量+按钮
    "minus_button": "button:has-text('-')",  # 数量-按钮
    "remove_button": "button[title='remove product from cart']",  # 删除商品按钮
    "cart_badge": "div.sc-1h98xa9-3.VLMSP",  # 购物车角标数量
    "cart_subtotal": "div.sc-1h98xa9-8.bciIxg p.sc-1h98xa9-9.jzywDV",  # 购物车小计
    "empty_cart_message": "p.sc-7th5t8-1.hqDkK",  # 空购物车提示
}
