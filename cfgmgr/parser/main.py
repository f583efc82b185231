from __future__ import annotations

from .files import PathLike, parse_cfg_lines, read_cfg_lines
from .types import ConfigMap


def load(path: PathLike, encoding: str = "utf-8") -> ConfigMap:
    """
    Load a plain text config file into a dict of key -> ConfigValue.

    Any OSError raised while opening or reading the file propagates and no
    partial result is returned. Values that are not numbers are never an
    error; they are kept as strings.
    """
    return parse_cfg_lines(read_cfg_lines(path, encoding=encoding))


def loads(text: str) -> ConfigMap:
    """Same as load(), for config text already in memory."""
    return parse_cfg_lines(text.split("\n"))
