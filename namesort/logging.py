from logging import DEBUG as DEBUG_LV
from logging import WARNING, Formatter, StreamHandler, getLogger

from .consts import DEBUG

log = getLogger("namesort")

_handler = StreamHandler()
_handler.setFormatter(Formatter(fmt="[%(levelname)s] %(message)s"))
log.addHandler(_handler)
log.setLevel(DEBUG_LV if DEBUG else WARNING)
