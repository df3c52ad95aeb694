# SPDX-License-Identifier: MIT

import pendulum

DEADLINE_DATE_FORMAT = "DD/MM/YYYY"
# Deadlines fall one second past midnight UTC on their date
DEADLINE_TIMESTAMP_SUFFIX = "T00:00:01Z"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def date_to_deadline_timestamp(date: pendulum.Date) -> str:
    return date.format(DEADLINE_DATE_FORMAT) + DEADLINE_TIMESTAMP_SUFFIX


def deadline_timestamp_to_datetime(timestamp: str) -> pendulum.DateTime:
    date_part, _, _ = timestamp.partition("T")
    midnight = pendulum.from_format(date_part, DEADLINE_DATE_FORMAT, tz="UTC")
    return midnight.add(seconds=1)


def deadline_timestamp_to_display_str(timestamp: str, display_format: str) -> str:
    return deadline_timestamp_to_datetime(timestamp).format(display_format)
