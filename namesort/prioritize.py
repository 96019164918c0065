from dataclasses import dataclass
from typing import Sequence

from std2.types import never

from .tokenizer.types import ABBREVIATIONS, Component, Line, Tag


@dataclass(frozen=True)
class PrioritizedLine:
    sort_key: Sequence[str]
    debug_render: str
    original_line: str


def priority(tag: Tag) -> int:
    if tag is Tag.Name:
        return 0
    elif tag is Tag.LowerCase:
        return 1
    elif tag is Tag.Other:
        return 2
    elif tag is Tag.Title:
        return 3
    elif tag is Tag.Space:
        return 4
    else:
        never(tag)


def render(component: Component) -> str:
    return f"{ABBREVIATIONS[component.tag]}:{component.text}"


def prioritize(line: Line) -> PrioritizedLine:
    """
    `line` must be right to left, last scanned component first

    The stable sort then puts the last `Name` of the original text in front
    """

    ranked = sorted(line, key=lambda c: priority(c.tag))
    return PrioritizedLine(
        sort_key=tuple(component.text for component in ranked),
        debug_render=" ".join(map(render, ranked)),
        original_line="".join(component.text for component in reversed(line)),
    )
