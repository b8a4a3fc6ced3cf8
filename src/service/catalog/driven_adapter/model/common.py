from datetime import datetime, timezone

import uuid_utils


def new_id() -> str:
    return str(uuid_utils.uuid7())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
