# util/functions.py
from datetime import datetime
from typing import List, Tuple

PLACEHOLDER = "%s"


def fill_template(template: str, value: str) -> str:
    """
    - Substitute `value` into the first `%s` of `template`.
    - A template without a placeholder is returned unchanged.
    """
    if PLACEHOLDER not in template:
        return template
    return template.replace(PLACEHOLDER, value, 1)


def split_query(q: str) -> Tuple[str, List[str]]:
    # Single-space split: "gh  foo" keeps the empty middle token.
    tokens = q.split(" ")
    return tokens[0], tokens[1:]


def format_stamp(timestamp_ns: int) -> str:
    """Render nanoseconds since epoch like `Jan 02 15:04:05.000`."""
    dt = datetime.fromtimestamp(timestamp_ns / 1_000_000_000)
    return f"{dt:%b %d %H:%M:%S}.{dt.microsecond // 1000:03d}"
