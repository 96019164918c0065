from string import ascii_lowercase, ascii_uppercase
from typing import AbstractSet, Callable, Iterator, Sequence, Tuple

from .types import Component, Line, Tag

"""
line      ::= (title | name | lowercase | space | other)*
title     ::= ('Dr' | 'Prof' 'essor'? | 'PhD' | 'Do' ('c' | 'k') 'tor') '.'?
name      ::= upper letter*
lowercase ::= lower letter*
space     ::= sep+
other     ::= .
letter    ::= [^ sep '\n']
sep       ::= ' ' | '\t' | '\u00a0' | '\r'

longest match wins, ties go to the earliest rule
"""

SEPARATOR = "\u00a0"

_TITLES = ("Dr", "Prof", "Professor", "PhD", "Doctor", "Doktor")
_UPPER_CHARS = {*ascii_uppercase, "Ä", "Ö", "Ü"}
_LOWER_CHARS = {*ascii_lowercase, "ä", "ö", "ü", "ß"}
_SPACE_CHARS = {" ", "\t", SEPARATOR, "\r"}
_BOUNDARY_CHARS = {*_SPACE_CHARS, "\n"}

_Rule = Callable[[str, int], int]


def _title(text: str, i: int) -> int:
    def cont() -> Iterator[int]:
        for title in _TITLES:
            if text.startswith(title, i):
                end = i + len(title)
                yield len(title) + 1 if text[end : end + 1] == "." else len(title)

    return max(cont(), default=0)


def _run(text: str, i: int, chars: Callable[[str], bool]) -> int:
    end = i
    while end < len(text) and chars(text[end]):
        end += 1
    return end - i


def _word(first: AbstractSet[str]) -> _Rule:
    def rule(text: str, i: int) -> int:
        if text[i] in first:
            return 1 + _run(text, i + 1, lambda c: c not in _BOUNDARY_CHARS)
        else:
            return 0

    return rule


def _space(text: str, i: int) -> int:
    return _run(text, i, lambda c: c in _SPACE_CHARS)


def _other(text: str, i: int) -> int:
    return 1


_RULES: Sequence[Tuple[Tag, _Rule]] = (
    (Tag.Title, _title),
    (Tag.Name, _word(_UPPER_CHARS)),
    (Tag.LowerCase, _word(_LOWER_CHARS)),
    (Tag.Space, _space),
    (Tag.Other, _other),
)


def _scan(text: str) -> Iterator[Component]:
    i = 0
    while i < len(text):
        # max() keeps the first of equally long matches
        tag, length = max(
            ((tag, rule(text, i)) for tag, rule in _RULES), key=lambda t: t[1]
        )
        yield Component(tag=tag, text=text[i : i + length])
        i += length


def tokenize(text: str) -> Line:
    """
    Components of `text` in scan order

    Blank lines produce no components at all
    """

    if all(c in _BOUNDARY_CHARS for c in text):
        return ()
    else:
        return tuple(_scan(text))


def lex(text: str) -> Line:
    """
    Components of `text` last scanned first
    """

    return tuple(reversed(tokenize(text)))


def untokenize(line: Line) -> str:
    return "".join(component.text for component in line)
