from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ConfigValue:
    """
    Parsed value of a single configuration key.

    - numeric: every number parsed for the key, in the order it appeared
    - string: the raw text kept when the value could not be read as numbers
    """
    numeric: List[float] = field(default_factory=list)
    string: str = ""

    def copy(self) -> "ConfigValue":
        return ConfigValue(numeric=list(self.numeric), string=self.string)


ConfigMap = Dict[str, ConfigValue]


class ConfigReadError(OSError):
    """A configuration source could not be decoded as text."""
