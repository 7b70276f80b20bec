from dataclasses import dataclass
from decimal import Decimal
import re
from typing import Any, Callable, Optional

"""从页面文本中解析价格、数量、商品总数"""

MONEY_PATTERN = re.compile(r"\$\s*([\d.]+)")
QUANTITY_PATTERN = re.compile(r"Quantity:\s*(\d+)", re.IGNORECASE)
PRODUCTS_FOUND_PATTERN = re.compile(r"^\s*(\d+)\s*Product")
BADGE_PATTERN = re.compile(r"^\s*(\d+)\s*$")

CENT = Decimal("0.01")


class ParseError(ValueError):
    """页面文本不符合预期格式"""


@dataclass(frozen=True)
class Parsed:
    """解析结果：成功时value有值，失败时value为None，由调用方决定是否抛错"""
    text: str
    pattern: str
    value: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap(self):
        if not self.ok:
            raise ParseError(f"无法从文本中解析 {self.pattern!r}：{self.text!r}")
        return self.value

    def value_or(self, default):
        return self.value if self.ok else default


def _parse(pattern: re.Pattern, text: Optional[str], convert: Callable[[str], Any]) -> Parsed:
    text = text or ""
    match = pattern.search(text)
    if not match:
        return Parsed(text=text, pattern=pattern.pattern)
    try:
        value = convert(match.group(1))
    except (ArithmeticError, ValueError):  # 例如 "$ ." 匹配成功但不是合法数字
        return Parsed(text=text, pattern=pattern.pattern)
    return Parsed(text=text, pattern=pattern.pattern, value=value)


def parse_money(text: Optional[str]) -> Parsed:
    """
        从 '$ 27.00' 或 'SUBTOTAL $ 95.90' 提取 Decimal('27.00')
        """
    return _parse(MONEY_PATTERN, text, Decimal)


def parse_quantity(text: Optional[str]) -> Parsed:
    """从 'X | Blue Quantity: 3' 提取 3"""
    return _parse(QUANTITY_PATTERN, text, int)


def parse_products_found(text: Optional[str]) -> Parsed:
    """从 '16 Product(s) found' 提取 16"""
    return _parse(PRODUCTS_FOUND_PATTERN, text, int)


def parse_badge(text: Optional[str]) -> Parsed:
    """购物车角标 ' 4 ' -> 4"""
    return _parse(BADGE_PATTERN, text, int)


def money(value: Decimal) -> Decimal:
    """金额按分（0.01）取整"""
    return Decimal(value).quantize(CENT)
