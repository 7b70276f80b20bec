class StoreAssert:

    @staticmethod
    def product_count(found_count: int, grid_count: int):
        """'N Product(s) found' = 商品列表实际数量"""
        assert found_count == grid_count, f"页面显示找到商品数量：{found_count}，商品列表实际数量：{grid_count}"

    @staticmethod
    def filter_state(size: str, actual: bool, expect: bool):
        assert actual == expect, f"尺码筛选{size}状态错误：实际{'选中' if actual else '未选中'}"
