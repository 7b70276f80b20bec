from decimal import Decimal

from utils.common_utils import money


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车角标显示数字 = Σ 商品行数量"""
        assert actual == expect, f"购物车角标显示的商品数量错误：{actual}!={expect}"

    @staticmethod
    def line_item_count(actual: int, expect: int):
        """购物车商品行数（不同商品数）"""
        assert actual == expect, f"购物车商品行数不符合预期：{actual}!={expect}"

    @staticmethod
    def unit_price(product_name: str, actual: Decimal, expect: Decimal):
        assert money(actual) == money(expect), f"商品{product_name}单价错误：{money(actual)}!={money(expect)}"

    @staticmethod
    def subtotal(actual: Decimal, expect: Decimal):
        """页面小计 = Σ 单价 × 数量，按分比较"""
        assert money(actual) == money(expect), f"购物车小计错误：页面显示{money(actual)}!=计算值{money(expect)}"

    @staticmethod
    def cart_empty(is_empty: bool, item_count: int):
        assert is_empty, f"空购物车提示未显示，购物车仍有{item_count}个商品行"
        assert item_count == 0, f"空购物车提示已显示，但购物车仍有{item_count}个商品行"

    @staticmethod
    def product_line(product_name: str, line_count: int):
        """同一商品在购物车中只能有一行"""
        assert line_count == 1, f"商品{product_name}在购物车中有{line_count}行，预期1行"
