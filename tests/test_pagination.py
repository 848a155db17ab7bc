"""
Tests for paginated listings.
"""
import pytest

from bestchoice.types import KeywordResponse, PageResponse


def _keywords(count: int) -> list[KeywordResponse]:
    return [KeywordResponse(id=i, label=f"kw-{i}", active=True) for i in range(1, count + 1)]


class TestPageResponse:
    """Tests for page construction."""

    def test_first_page(self):
        """Test the flags of the first of several pages."""
        page = PageResponse[KeywordResponse].of(_keywords(2), page=0, size=2, total=5)

        assert page.total_pages == 3
        assert page.first and not page.last
        assert page.has_next and not page.has_previous

    def test_last_page(self):
        """Test the flags of the last page."""
        page = PageResponse[KeywordResponse].of(_keywords(1), page=2, size=2, total=5)

        assert page.last and not page.first
        assert not page.has_next
        assert page.has_previous

    def test_empty_listing(self):
        """Test that an empty listing is a single first and last page."""
        page = PageResponse[KeywordResponse].of([], page=0, size=20, total=0)

        assert page.total_pages == 0
        assert page.first and page.last
        assert not page.has_next

    @pytest.mark.parametrize("size", [0, -5])
    def test_size_must_be_positive(self, size):
        """Test that a page size under 1 is rejected."""
        with pytest.raises(ValueError, match="Page size must be at least 1"):
            PageResponse[KeywordResponse].of([], page=0, size=size, total=3)

    def test_serializes_items(self):
        """Test that items are serialized in the page content."""
        page = PageResponse[KeywordResponse].of(_keywords(1), page=0, size=10, total=1)
        assert page.model_dump(mode="json")["content"] == [
            {"id": 1, "label": "kw-1", "description": None, "domain": None, "active": True}
        ]
