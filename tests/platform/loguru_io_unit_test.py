import pytest

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


class TestMasking:
    def test_masks_sensitive_pairs_in_text(self):
        masked = mask_sensitive("Settings(POSTGRES_PASSWORD='hunter2', POSTGRES_DB='x')")

        assert 'hunter2' not in masked
        assert "POSTGRES_DB='x'" in masked

    def test_plain_data_is_returned_unchanged(self):
        data = {'name': 'Spring Gala'}
        assert mask_sensitive(data) is data

    def test_sensitive_keyword(self):
        assert should_mask_keyword('api_token', 'abc') == MASK
        assert should_mask_keyword('name', 'abc') == 'abc'

    def test_truncate(self):
        assert truncate_content('short') == 'short'
        truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))
        assert truncated.endswith('(truncated 10 chars)')


class TestLoggerIo:
    def test_sync_return_value_passes_through(self):
        @Logger.io
        def double(value: int) -> int:
            return value * 2

        assert double(4) == 8

    @pytest.mark.asyncio
    async def test_async_exception_is_reraised_once_logged(self):
        @Logger.io
        async def inner() -> None:
            raise ValidationError('bad input')

        @Logger.io
        async def outer() -> None:
            await inner()

        with pytest.raises(ValidationError) as exc_info:
            await outer()

        assert getattr(exc_info.value, '_has_logged', False)

    def test_reraise_disabled_returns_none(self):
        @Logger.io(reraise=False)
        def boom() -> int:
            raise RuntimeError('boom')

        assert boom() is None
