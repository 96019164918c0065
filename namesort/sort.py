from typing import Iterable, Iterator, Sequence

from .prioritize import PrioritizedLine, prioritize
from .timeit import timeit
from .tokenizer.lexer import lex


def sort_lines(lines: Iterable[PrioritizedLine]) -> Sequence[PrioritizedLine]:
    """
    Code point order per element, shorter key first on a common prefix

    Equal keys keep their input order
    """

    return sorted(lines, key=lambda line: tuple(line.sort_key))


def namesort(lines: Iterable[str]) -> Sequence[PrioritizedLine]:
    with timeit("tokenize"):
        prioritized = tuple(prioritize(line) for line in map(lex, lines) if line)
    with timeit("sort", len(prioritized)):
        return sort_lines(prioritized)


def originals(lines: Iterable[PrioritizedLine]) -> Iterator[str]:
    for line in lines:
        yield line.original_line


def debug_renders(lines: Iterable[PrioritizedLine]) -> Iterator[str]:
    for line in lines:
        yield line.debug_render
