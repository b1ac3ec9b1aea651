"""
Small helpers for reading computed CSS values.
"""

import re
from typing import List, Optional

LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")
PX_VALUE_RE = re.compile(r"(-?[\d.]+)px")


def split_top_level(value: Optional[str]) -> List[str]:
    """Split a comma separated list, ignoring commas nested inside parentheses.

    ``"rgb(0,0,0), rgb(1,1,1)"`` gives two entries, not six.
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    for char in value or "":
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def parse_number(value: Optional[str], default: Optional[float] = None) -> Optional[float]:
    """Read the leading number of a value the way ``parseFloat`` does.

    ``"12px"`` -> 12.0, ``"8px 4px"`` -> 8.0, ``"normal"`` -> default.
    """
    if value is None:
        return default
    match = LEADING_NUMBER_RE.match(str(value))
    if not match:
        return default
    try:
        return float(match.group(1))
    except ValueError:
        return default


def parse_px_values(value: str) -> List[float]:
    out = []
    for token in PX_VALUE_RE.findall(value or ""):
        try:
            out.append(float(token))
        except ValueError:
            # stray dots such as "..px"
            continue
    return out
