import logging
import re
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from playwright.sync_api import Page, Locator

from config.locators import STORE_LOCATORS, CART_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage
from assertions.store_assert import StoreAssert
from assertions.cart_assert import CartAssert
from utils.common_utils import parse_money, parse_quantity, parse_products_found, parse_badge


class Size(str, Enum):
    """尺码筛选只允许这7个值"""
    XS = "XS"
    S = "S"
    M = "M"
    ML = "ML"
    L = "L"
    XL = "XL"
    XXL = "XXL"


class StorePage(BasePage):
    def __init__(self, page: Page, logger: Optional[logging.Logger] = None):
        super().__init__(page, logger)

        # 商品列表
        self.products_container = page.locator(STORE_LOCATORS["products_container"])  # 商品列表容器
        self.product_cards = self.products_container.locator(":scope > div")  # 商品列表直接子元素
        self.products_found_text = page.get_by_text(re.compile(r"Product\(s\) found"))  # "N Product(s) found"

        # 购物车
        self.cart_button = page.locator(CART_LOCATORS["cart_button"])  # 打开购物车
        self.close_cart_button = page.get_by_role("button", name=CART_LOCATORS["close_cart_button"], exact=True)
        self.items_in_cart = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_badge = page.locator(CART_LOCATORS["cart_badge"])  # 角标数量
        self.cart_subtotal = page.locator(CART_LOCATORS["cart_subtotal"])  # 小计
        self.empty_cart_message = page.locator(CART_LOCATORS["empty_cart_message"])  # 空购物车提示

    # ================= 元素定位 =================
    def get_add_to_cart_button(self, product_name: str) -> Locator:
        """商品列表中按名称精确匹配的 Add to cart 按钮（避免 'T-Shirt' 匹配到 'T-Shirt Deluxe'）"""
        return (self.products_container
                .locator(STORE_LOCATORS["product_card"])
                .filter(has=self.page.get_by_text(product_name, exact=True))
                .get_by_role("button", name=re.compile("add to cart", re.IGNORECASE)))

    def get_cart_item(self, product_name: str) -> Locator:
        return self.items_in_cart.filter(has=self.page.get_by_text(product_name, exact=True))

    def get_plus_button(self, product_name: str) -> Locator:
        return self.get_cart_item(product_name).locator(CART_LOCATORS["plus_button"])

    def get_minus_button(self, product_name: str) -> Locator:
        return self.get_cart_item(product_name).locator(CART_LOCATORS["minus_button"])

    def get_filter_size(self, size: Union[Size, str]) -> Locator:
        return self.page.locator(STORE_LOCATORS["size_filter"].format(size=Size(size).value))

    def _filter_input(self, size: Union[Size, str]) -> Locator:
        return self.page.locator(STORE_LOCATORS["size_filter_input"].format(size=Size(size).value))

    # ================= 页面行为 =================
    def open(self, url: Optional[str] = None):
        super().open(url or URLS[ENV]["store"])

    def click_size_filter(self, size: Union[Size, str]):
        """切换尺码筛选（点击一次=切换一次），等待checkbox状态变化后返回"""
        size = Size(size)
        was_active = self.is_size_filter_active(size)
        self.click(self.get_filter_size(size))
        self.wait_checked(self._filter_input(size), not was_active)
        self.logger.debug(f"尺码筛选 {size.value}：{'关闭' if was_active else '开启'}")

    def add_product_to_cart(self, product_name: str):
        self.click(self.get_add_to_cart_button(product_name))
        self.logger.debug(f"加购商品：{product_name}")

    def add_products_to_cart(self, product_names: list[str]):
        """按顺序加购；是否关闭购物车由调用方决定"""
        for product_name in product_names:
            self.add_product_to_cart(product_name)

    def open_cart(self):
        self.click(self.cart_button)

    def close_cart(self):
        self.click(self.close_cart_button)

    def increase_product_quantity(self, product_name: str, times: int):
        """点击+按钮times次，每次等待数量显示更新"""
        if times <= 0:
            raise ValueError("times must be greater than 0")

        item = self.get_cart_item(product_name)
        button = self.get_plus_button(product_name)
        quantity = self.get_quantity_of_item(item)
        for i in range(1, times + 1):
            self.click(button)
            self.wait_text(item.locator(CART_LOCATORS["cart_item_quantity"]), rf"Quantity:\s*{quantity + i}\b")
        self.logger.debug(f"{product_name} 数量 {quantity} -> {quantity + times}")

    def click_minus_n_times(self, button: Locator, times: int, current_quantity: Optional[int] = None):
        """点击-按钮times次，每次等待角标数量更新；传入current_quantity时不允许减到0以下"""
        if times <= 0:
            raise ValueError("times must be greater than 0")
        if current_quantity is not None and times > current_quantity:
            raise ValueError("Cannot subtract more than the current quantity")

        badge = self.get_cart_badge_count()
        for i in range(1, times + 1):
            self.click(button)
            self.wait_text(self.cart_badge, rf"^\s*{badge - i}\s*$")

    def decrease_product_quantity(self, product_name: str, times: int):
        current_quantity = self.get_quantity_of_item(self.get_cart_item(product_name))
        self.click_minus_n_times(self.get_minus_button(product_name), times, current_quantity)
        self.logger.debug(f"{product_name} 数量 -{times}")

    def remove_product(self, product_name: str):
        item = self.get_cart_item(product_name)
        self.click(item.locator(CART_LOCATORS["remove_button"]))
        self.wait_count(item, 0)

    def empty_cart_by_remove_button(self):
        """每次删除第一行，删除后重新读取行数，直到购物车为空"""
        count = self.get_product_item_count()
        while count > 0:
            self.click(self.items_in_cart.first.locator(CART_LOCATORS["remove_button"]))
            self.wait_count(self.items_in_cart, count - 1)
            count = self.get_product_item_count()
        self.logger.debug("购物车已清空")

    # ================= 数据获取 =================
    def is_size_filter_active(self, size: Union[Size, str]) -> bool:
        return self._filter_input(size).is_checked()

    def get_products_found_count(self) -> int:
        """'16 Product(s) found' -> 16"""
        return parse_products_found(self.text(self.products_found_text)).unwrap()

    def get_product_count(self) -> int:
        return self.get_count(self.product_cards)

    def get_product_item_count(self) -> int:
        """购物车中不同商品的行数（不是总数量）"""
        return self.get_count(self.items_in_cart)

    def _line_items(self) -> list[Locator]:
        return [self.items_in_cart.nth(i) for i in range(self.get_product_item_count())]

    def get_price_of_item(self, item: Locator) -> Decimal:
        return parse_money(self.text(item.locator(CART_LOCATORS["cart_item_price"]))).unwrap()

    def get_quantity_of_item(self, item: Locator) -> int:
        return parse_quantity(self.text(item.locator(CART_LOCATORS["cart_item_quantity"]))).unwrap()

    def get_price_of_product(self, product_name: str) -> Decimal:
        return self.get_price_of_item(self.get_cart_item(product_name))

    def get_total_cart_items_count(self) -> int:
        """Σ 每行数量"""
        return sum(self.get_quantity_of_item(item) for item in self._line_items())

    def get_cart_badge_count(self) -> int:
        return parse_badge(self.text(self.cart_badge)).unwrap()

    def get_cart_item_costs(self) -> Decimal:
        """Σ 单价 × 数量（预期小计）"""
        return sum((self.get_price_of_item(item) * self.get_quantity_of_item(item) for item in self._line_items()),
                   Decimal("0"))

    def get_cart_subtotal(self) -> Decimal:
        return parse_money(self.text(self.cart_subtotal).strip()).unwrap()

    def is_cart_empty(self) -> bool:
        return self.is_visible(self.empty_cart_message)

    # ================= 基础验证 =================
    def verify_product_count(self):
        # 等待商品列表渲染到 found 数量后再比较
        self.wait_count(self.product_cards, self.get_products_found_count())
        StoreAssert.product_count(self.get_products_found_count(), self.get_product_count())

    def verify_size_filter(self, size: Union[Size, str], active: bool):
        StoreAssert.filter_state(Size(size).value, self.is_size_filter_active(size), active)

    def verify_cart_product_count(self, expect_count: int):
        CartAssert.line_item_count(self.get_product_item_count(), expect_count)

    def verify_products_in_cart(self, product_names: list[str]):
        """每个加购商品在购物车中恰好一行，且没有多余的行"""
        for product_name in product_names:
            CartAssert.product_line(product_name, self.get_count(self.get_cart_item(product_name)))
        CartAssert.line_item_count(self.get_product_item_count(), len(product_names))

    def verify_product_prices(self, expect_prices: dict):
        """购物车中每个商品的单价"""
        for product_name, expect_price in expect_prices.items():
            CartAssert.unit_price(product_name, self.get_price_of_product(product_name), expect_price)

    def verify_total_cart_items_count(self):
        CartAssert.cart_badge_count(self.get_cart_badge_count(), self.get_total_cart_items_count())

    def verify_cart_badge_count(self, expect_count: int):
        CartAssert.cart_badge_count(self.get_cart_badge_count(), expect_count)

    def verify_subtotal_matches_item_costs(self):
        CartAssert.subtotal(self.get_cart_subtotal(), self.get_cart_item_costs())

    def verify_cart_subtotal(self, expect_subtotal: Decimal):
        CartAssert.subtotal(self.get_cart_subtotal(), expect_subtotal)

    def verify_cart_is_empty(self):
        self.wait_visible(self.empty_cart_message)
        CartAssert.cart_empty(self.is_cart_empty(), self.get_product_item_count())
