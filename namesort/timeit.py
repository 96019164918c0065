from contextlib import contextmanager
from typing import Any, Iterator

from std2.locale import si_prefixed_smol
from std2.timeit import timeit as _timeit

from .consts import DEBUG
from .logging import log


@contextmanager
def timeit(name: str, *args: Any) -> Iterator[None]:
    if DEBUG:
        with _timeit() as t:
            yield None
        delta = t().total_seconds()
        time = f"{si_prefixed_smol(delta, precision=0)}s"
        log.debug("%s", f"TIME -- {name} :: {time} {' '.join(map(str, args))}")
    else:
        yield None
