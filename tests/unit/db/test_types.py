from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta, timezone

from sqlalchemy.dialects import postgresql, sqlite

from sentinel_api.db import UTCDateTime, UUIDType

ACCOUNT_ID = uuid.UUID("123e4567-e89b-12d3-a456-426614174000")


def test_uuid_is_stored_as_text_on_sqlite() -> None:
    column_type = UUIDType()
    dialect = sqlite.dialect()

    assert column_type.process_bind_param(ACCOUNT_ID, dialect) == str(ACCOUNT_ID)
    assert column_type.process_bind_param(str(ACCOUNT_ID), dialect) == str(ACCOUNT_ID)
    assert column_type.process_result_value(str(ACCOUNT_ID), dialect) == ACCOUNT_ID
    assert column_type.process_bind_param(None, dialect) is None


def test_uuid_is_native_on_postgresql() -> None:
    column_type = UUIDType()
    dialect = postgresql.dialect()

    assert column_type.process_bind_param(str(ACCOUNT_ID), dialect) == ACCOUNT_ID
    assert column_type.process_result_value(ACCOUNT_ID, dialect) == ACCOUNT_ID


def test_datetimes_are_normalised_to_utc() -> None:
    column_type = UTCDateTime()
    dialect = sqlite.dialect()
    naive = datetime(2024, 5, 1, 12, 0)
    offset = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert column_type.process_result_value(naive, dialect) == naive.replace(tzinfo=UTC)
    assert column_type.process_bind_param(offset, dialect).tzinfo == UTC
    assert column_type.process_bind_param(offset, dialect).hour == 12
    assert column_type.process_result_value(None, dialect) is None
