from codecs import lookup, lookup_error
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from .consts import CONFIG_YML
from .logging import log


class ValidationError(Exception): ...


@dataclass(frozen=True)
class IOSettings:
    encoding: str
    errors: str


@dataclass(frozen=True)
class CLISettings:
    debug_stdin: bool


@dataclass(frozen=True)
class Settings:
    io: IOSettings
    cli: CLISettings


def load(user_config: Optional[Path]) -> Settings:
    yml = safe_load(CONFIG_YML.read_text("UTF-8"))
    u_conf: Any = safe_load(user_config.read_text("UTF-8")) if user_config else {}
    if user_config:
        log.debug("%s", f"user settings -- {user_config}")

    merged = merge(yml, u_conf or {}, replace=True)
    config = new_decoder[Settings](Settings)(merged)

    try:
        lookup(config.io.encoding)
    except LookupError:
        raise ValidationError(f"io.encoding: {config.io.encoding}")
    try:
        lookup_error(config.io.errors)
    except LookupError:
        raise ValidationError(f"io.errors: {config.io.errors}")

    return config
