"""
Utilities for RingVote.
"""

import json

import pytz

from datetime import datetime
from app.config import TIMEZONE


# -- JSON manipulation --


def to_json(d: dict):
    return json.dumps(d, sort_keys=True, default=str)


def from_json(value):
    if value == "" or value is None:
        return None

    if isinstance(value, str):
        try:
            return json.loads(value)
        except Exception as e:
            raise Exception(
                "ringvote.utils error: in from_json, value is not JSON parseable"
            ) from e

    return value


# -- Datetime --
def tz_now():
    tz = pytz.timezone(TIMEZONE)
    return datetime.now(tz)
