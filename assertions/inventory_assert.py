class InventoryAssert:

    @staticmethod
    def sort_asc(values: list):
        assert values == sorted(values), f"未正序排列：{values}"

    @staticmethod
    def sort_desc(values: list):
        assert values == sorted(values, reverse=True), f"未倒序排列：{values}"
