from epub_writer.epub.ids import next_creator_id, next_item_id


class TestNextItemId:
    """测试 manifest id 的生成"""

    def test_empty(self):
        assert next_item_id([]) == "R1"

    def test_after_max(self):
        """新 id 应该比当前最大的数字后缀大 1，而不是按数量计算"""
        assert next_item_id(["R1", "R7", "R3"]) == "R8"

    def test_ignore_foreign_ids(self):
        assert next_item_id(["R2", "cover", "Rx", "X9"]) == "R3"

    def test_never_starts_with_digit(self):
        ids: list[str] = []
        for _ in range(12):
            ids.append(next_item_id(ids))
        assert len(set(ids)) == len(ids)
        assert all(not item_id[0].isdigit() for item_id in ids)

    def test_custom_prefix(self):
        assert next_item_id(["img1", "img2"], prefix="img") == "img3"


class TestNextCreatorId:
    """测试作者 id 的生成"""

    def test_first_creator_uses_bare_prefix(self):
        assert next_creator_id([]) == "creator"

    def test_following_creators_start_at_two(self):
        ids: list[str] = []
        for _ in range(4):
            ids.append(next_creator_id(ids))
        assert ids == ["creator", "creator2", "creator3", "creator4"]

    def test_gap(self):
        assert next_creator_id(["creator", "creator5"]) == "creator6"
