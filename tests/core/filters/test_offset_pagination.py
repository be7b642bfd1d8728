import pytest

from core.filters.offset_pagination import OffsetPagination


class TestPaginate:
    def test_first_page(self) -> None:
        page, total, has_more = OffsetPagination.paginate([1, 2, 3, 4, 5], offset=0, limit=2)

        assert page == [1, 2]
        assert total == 5
        assert has_more is True

    def test_last_page(self) -> None:
        page, total, has_more = OffsetPagination.paginate([1, 2, 3, 4, 5], offset=4, limit=2)

        assert page == [5]
        assert total == 5
        assert has_more is False

    def test_offset_past_end(self) -> None:
        page, total, has_more = OffsetPagination.paginate([1, 2], offset=10, limit=5)

        assert page == []
        assert total == 2
        assert has_more is False


class TestValidate:
    @pytest.mark.parametrize(
        "limit,offset,message",
        [
            (0, 0, "Limit must be at least 1"),
            (101, 0, "Limit must not exceed 100"),
            (10, -1, "Offset must be zero or a positive integer"),
        ],
    )
    def test_invalid(self, limit: int, offset: int, message: str) -> None:
        assert OffsetPagination.validate(limit, offset) == (False, message)

    def test_valid(self) -> None:
        assert OffsetPagination.validate(100, 0) == (True, "")


def test_page_info() -> None:
    info = OffsetPagination.page_info(offset=0, limit=2, total_count=3)

    assert info.total_count == 3
    assert info.has_more is True
    assert info.next_offset == 2

    last = OffsetPagination.page_info(offset=2, limit=2, total_count=3)

    assert last.has_more is False
    assert last.next_offset is None
