from datetime import date, datetime, timedelta
from typing import Union
from uuid import uuid4 as _uuid4


def uuid4() -> str:
    return str(_uuid4())


def whole_days_between(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """Whole days from start to end, truncated toward zero."""
    return int((end - start) / timedelta(days=1))
