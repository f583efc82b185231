from __future__ import annotations

import math
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Any

import yaml  # type: ignore[import]

from cfgmgr.parser.types import ConfigMap, ConfigValue


def _select(config: ConfigMap, keys: Optional[Iterable[str]]) -> List[str]:
    if keys is None:
        return sorted(config)
    # first occurrence wins, unknown keys are dropped
    return [k for k in dict.fromkeys(keys) if k in config]


def format_number(number: float) -> str:
    """
    Shortest round-trip decimal, never in exponent form and without a
    trailing '.0': 3.0 -> '3', 1e-10 -> '0.0000000001'.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"

    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_entry(key: str, value: ConfigValue) -> str:
    """
    Render one entry as 'key: n1, n2, ;string'.

    Numbers come first, each followed by ', '; the string part (possibly
    empty) comes after the ';'.
    """
    numbers = "".join(f"{format_number(n)}, " for n in value.numeric)
    return f"{key}: {numbers};{value.string}"


def format_text(config: ConfigMap, keys: Optional[Iterable[str]] = None) -> str:
    return "\n".join(format_entry(k, config[k]) for k in _select(config, keys))


def format_yaml(config: ConfigMap, keys: Optional[Iterable[str]] = None) -> str:
    data: Dict[str, Dict[str, Any]] = {}
    for k in _select(config, keys):
        value = config[k]
        data[k] = {"numeric": list(value.numeric), "string": value.string}

    if not data:
        return ""
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False).rstrip("\n")
