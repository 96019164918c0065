from os import environ
from pathlib import Path

TOP_LEVEL = Path(__file__).resolve().parent

_CONF_DIR = TOP_LEVEL / "config"
CONFIG_YML = _CONF_DIR / "defaults.yml"


SETTINGS_VAR = "NAMESORT_SETTINGS"


DEBUG = "NAMESORT_DEBUG" in environ
