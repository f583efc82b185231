from __future__ import annotations

import os
from typing import Iterable, Iterator, Union

from .types import ConfigMap, ConfigReadError, ConfigValue
from .values import apply_segment


PathLike = Union[str, "os.PathLike[str]"]


def strip_comment(line: str) -> str:
    """Drop everything from the first '#' on."""
    pos = line.find("#")
    if pos == -1:
        return line
    return line[:pos]


def parse_line(line: str, config: ConfigMap) -> None:
    """
    Parse one `key = value[, value...]` line into `config`.

    Lines without '=' are ignored, even when they carry other text. A line
    whose only '=' sits in the comment still stores its key, with an empty
    value. Every '=' starts a new value segment; all segments of a line feed
    the same ConfigValue and the key is stored again after each one, so the
    entry ends up holding whatever the last segment left behind.
    """
    if "=" not in line:
        return

    fields = strip_comment(line).split("=")
    key = fields[0].strip()
    value = ConfigValue()
    config[key] = value.copy()

    for segment in fields[1:]:
        apply_segment(value, segment)
        config[key] = value.copy()


def parse_cfg_lines(lines: Iterable[str]) -> ConfigMap:
    config: ConfigMap = {}
    for line in lines:
        parse_line(line, config)
    return config


def read_cfg_lines(path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield the lines of a config file.

    Open and read failures surface as OSError; undecodable content as
    ConfigReadError. The file is closed however iteration ends.
    """
    # only "\n" ends a line; a stray "\r" stays part of it
    with open(path, "r", encoding=encoding, newline="\n") as f:
        try:
            for line in f:
                yield line
        except UnicodeDecodeError as e:
            raise ConfigReadError(
                f"cannot decode '{os.fspath(path)}' as {encoding}: {e.reason}"
            ) from e
