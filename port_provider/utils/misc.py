from datetime import datetime
from time import time


def get_time(seconds_precision: bool = True) -> float:
    """Return current time as Unix/Epoch timestamp, in seconds.
    :param seconds_precision: if True, return with seconds precision as integer (default).
                              If False, return with milliseconds precision as floating point number of seconds.
    """
    return time() if not seconds_precision else int(time())


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
