from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Sequence


class Tag(Enum):
    Name = auto()
    Title = auto()
    LowerCase = auto()
    Other = auto()
    Space = auto()


ABBREVIATIONS: Mapping[Tag, str] = {
    Tag.Name: "N",
    Tag.Title: "T",
    Tag.LowerCase: "L",
    Tag.Other: "O",
    Tag.Space: "S",
}


@dataclass(frozen=True)
class Component:
    tag: Tag
    text: str


# Either left to right (scan order) or right to left (prioritizer order)
Line = Sequence[Component]
File = Sequence[Line]
