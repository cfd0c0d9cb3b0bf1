from __future__ import annotations

from dataclasses import dataclass

VERSION = "v1.0.1"


@dataclass(frozen=True)
class Config:
    prog: str = "eui64tool"
    version: str = VERSION
    author: str = "by Seth Adkins (https://github.com/sethechosenone/eui64tool)"
    log_level: str = "WARNING"
