from pathlib import Path
from typing import BinaryIO, Iterable, Sequence, Union

from .logging import log
from .settings import IOSettings

LINE_SEP = "\n"


class SourceError(Exception): ...


def read_lines(settings: IOSettings, source: Union[Path, BinaryIO]) -> Sequence[str]:
    """
    Only `\\n` terminates a line, a `\\r` before it stays part of the line
    """

    try:
        raw = source.read_bytes() if isinstance(source, Path) else source.read()
        text = raw.decode(settings.encoding, errors=settings.errors)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(e) from e
    else:
        lines = text.split(LINE_SEP)
        log.debug("%s", f"read {len(lines)} lines")
        return lines


def write_lines(settings: IOSettings, sink: BinaryIO, lines: Iterable[str]) -> None:
    for line in lines:
        sink.write((line + LINE_SEP).encode(settings.encoding, errors=settings.errors))
    sink.flush()
