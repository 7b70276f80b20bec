"""购物车功能测试用例：测试数据
按尺码筛选后商品数量一致
加购两件商品，其中一件数量+2
角标数量、小计金额校验
逐个删除后购物车为空
"""
from decimal import Decimal

FILTER_SIZES = ["XS", "ML"]

PRODUCTS_TO_ADD = ["Blue T-Shirt", "Black T-shirt with white stripes"]

PRODUCT_PRICES = {
    "Blue T-Shirt": Decimal("27"),
    "Black T-shirt with white stripes": Decimal("14.9"),
}

INCREASE_PRODUCT = "Blue T-Shirt"
INCREASE_TIMES = 2

EXPECTED_BADGE_COUNT = 4  # 3 Blue T-Shirt + 1 Black T-shirt with white stripes
EXPECTED_SUBTOTAL = (PRODUCT_PRICES["Blue T-Shirt"] * (1 + INCREASE_TIMES)
                     + PRODUCT_PRICES["Black T-shirt with white stripes"])  # 3 * 27 + 1 * 14.9 = 95.90
