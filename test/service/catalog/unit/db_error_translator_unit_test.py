"""
Unit tests for translate_db_errors

Driver failures surface as the PersistenceError family with the status the API returns.
"""

import pytest
from sqlalchemy.exc import DataError, IntegrityError, OperationalError

from src.platform.exception.exceptions import OutOfRangeError, PersistenceError, ReferentialError
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors


@pytest.mark.unit
class TestTranslateDbErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error',
        [
            DataError('INSERT INTO venue', {}, Exception('value too long for type character varying(20)')),
            OverflowError('int too big to convert'),
            ValueError('invalid input for query argument $5: 100000000000000000000 (value out of int32 range)'),
        ],
    )
    async def test_out_of_range_values(self, error: Exception) -> None:
        # Act
        with pytest.raises(OutOfRangeError) as exc_info:
            async with translate_db_errors('create venue'):
                raise error

        # Assert
        assert exc_info.value.status_code == 422
        assert exc_info.value.message == 'Cannot create venue: a value does not fit its column'
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_missing_foreign_row(self) -> None:
        # Act
        with pytest.raises(ReferentialError) as exc_info:
            async with translate_db_errors('create event', referential_message='Venue v1 does not exist'):
                raise IntegrityError('INSERT INTO event', {}, Exception('FOREIGN KEY constraint failed'))

        # Assert
        assert exc_info.value.status_code == 409
        assert exc_info.value.message == 'Venue v1 does not exist'

    @pytest.mark.asyncio
    async def test_unreachable_database(self) -> None:
        # Act
        with pytest.raises(PersistenceError) as exc_info:
            async with translate_db_errors('create venue'):
                raise OperationalError('SELECT 1', {}, Exception('connection refused'))

        # Assert
        assert not isinstance(exc_info.value, OutOfRangeError)
        assert exc_info.value.status_code == 503
        assert exc_info.value.message == 'Cannot create venue: database unavailable'
