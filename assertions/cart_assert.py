class CartAssert:

    @staticmethod
    def same_names(actual: list[str], expected: list[str]):
        """购物车商品名称与加购商品一致，不关心顺序"""
        assert sorted(actual) == sorted(expected), f"购物车商品{sorted(actual)} != 加购商品{sorted(expected)}"

    @staticmethod
    def badge_matches_rows(badge_count: int, row_count: int):
        """角标数字 = 购物车商品行数"""
        assert badge_count == row_count, f"购物车角标数量{badge_count} != 购物车商品行数{row_count}"
