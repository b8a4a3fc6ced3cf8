"""Map SQLAlchemy/driver failures onto the PersistenceError family."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError

from src.platform.exception.exceptions import OutOfRangeError, PersistenceError, ReferentialError


_FOREIGN_KEY_SQLSTATE = '23503'


def is_foreign_key_violation(error: IntegrityError) -> bool:
    orig = error.orig
    sqlstate = getattr(orig, 'sqlstate', None) or getattr(getattr(orig, '__cause__', None), 'sqlstate', None)
    if sqlstate == _FOREIGN_KEY_SQLSTATE:
        return True
    # SQLite: "FOREIGN KEY constraint failed"; PostgreSQL: "violates foreign key constraint"
    return 'foreign key' in str(orig).lower()


@asynccontextmanager
async def translate_db_errors(action: str, *, referential_message: str = '') -> AsyncIterator[None]:
    try:
        yield
    except IntegrityError as e:
        if is_foreign_key_violation(e):
            raise ReferentialError(referential_message or f'Cannot {action}: referenced row does not exist') from e
        raise PersistenceError(f'Cannot {action}: constraint violation') from e
    # DataError: value too long / numeric overflow on PostgreSQL.
    # OverflowError and ValueError come from drivers binding an oversized int or Decimal.
    except (DataError, OverflowError, ValueError) as e:
        raise OutOfRangeError(f'Cannot {action}: a value does not fit its column') from e
    except (SQLAlchemyError, OSError) as e:
        raise PersistenceError(f'Cannot {action}: database unavailable') from e
