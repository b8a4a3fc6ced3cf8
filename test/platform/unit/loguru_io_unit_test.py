import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import access_log_level
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMasking:
    def test_media_bytes_are_summarized(self) -> None:
        assert mask_sensitive(b'\x89PNG\r\n') == '<6 bytes>'

    def test_token_assignment_is_masked(self) -> None:
        assert mask_sensitive('user=u1 token=eyJhbGciOi') == f'user=u1 token={MASK}'

    def test_plain_value_is_returned_untouched(self) -> None:
        payload = {'name': 'Riverside Hall'}
        assert mask_sensitive(payload) is payload

    @pytest.mark.parametrize('keyword', ['password', 'Authorization', 'TOKEN'])
    def test_sensitive_keyword(self, keyword: str) -> None:
        assert should_mask_keyword(keyword, 'value') == MASK

    def test_regular_keyword(self) -> None:
        assert should_mask_keyword('capacity', 300) == 300

    def test_long_content_is_truncated(self) -> None:
        text = 'x' * (MAX_CONTENT_LENGTH + 100)
        truncated = truncate_content(text)
        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith(f'({len(text)} chars)')


@pytest.mark.unit
class TestAccessLogLevel:
    @pytest.mark.parametrize(
        'status,expected',
        [(201, 'INFO'), (404, 'WARNING'), (422, 'WARNING'), (502, 'ERROR')],
    )
    def test_level_follows_status(self, status: int, expected: str) -> None:
        line = f'127.0.0.1 - "POST /api/venue HTTP/1.1" - {status} - 14ms'
        assert access_log_level(line) == expected

    def test_other_messages_keep_their_level(self) -> None:
        assert access_log_level('Venue 500 seats created') is None


@pytest.mark.unit
class TestLoggerIo:
    def test_sync_return_value_passes_through(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5

    @pytest.mark.asyncio
    async def test_async_return_value_passes_through(self) -> None:
        @Logger.io
        async def venue_name(venue_id: str) -> str:
            return f'venue-{venue_id}'

        assert await venue_name('v1') == 'venue-v1'

    def test_exception_is_reraised_and_marked_logged(self) -> None:
        @Logger.io
        def lookup() -> None:
            raise NotFoundError('Venue v1 not found')

        with pytest.raises(NotFoundError) as exc_info:
            lookup()
        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_exception_swallowed_without_reraise(self) -> None:
        @Logger.io(reraise=False)
        def lookup() -> None:
            raise NotFoundError('Venue v1 not found')

        assert lookup() is None
