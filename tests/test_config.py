"""
Tests for application settings.
"""
import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Test settings validation."""

    def test_default_page_size(self, monkeypatch):
        monkeypatch.delenv("PAGINATION_PAGE_SIZE", raising=False)
        assert Settings().pagination_page_size == 10

    def test_page_size_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_PAGE_SIZE", "25")
        assert Settings().pagination_page_size == 25

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive_page_size_is_rejected(self, monkeypatch, value):
        monkeypatch.setenv("PAGINATION_PAGE_SIZE", value)
        with pytest.raises(ValidationError):
            Settings()
