"""Pydantic models shared across the digest, draw, and narrative layers."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Line = Literal[0, 1]
Ball = Annotated[int, Field(ge=1, le=45)]
Relation = Literal["self", "generative", "restraining", "neutral"]


class Attribute(str, Enum):
    """The five cyclic attributes assigned to numbers and trigrams."""

    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"


class Trigram(str, Enum):
    """The eight three-line categories, keyed by their traditional names."""

    QIAN = "qian"
    DUI = "dui"
    LI = "li"
    ZHEN = "zhen"
    XUN = "xun"
    KAN = "kan"
    GEN = "gen"
    KUN = "kun"


class Category(BaseModel):
    """Static description of one trigram."""

    model_config = ConfigDict(frozen=True)

    trigram: Trigram
    pattern: tuple[Line, Line, Line]
    name: str
    symbol: str
    nature: str
    attribute: Attribute

    @property
    def label(self) -> str:
        return f"{self.symbol} {self.name}"


class Figure(BaseModel):
    """Six lines (index 0 is the bottom) with changing flags and the complementary figure."""

    lines: list[Line] = Field(min_length=6, max_length=6)
    changing: list[bool] = Field(min_length=6, max_length=6)
    complementary: list[Line] = Field(min_length=6, max_length=6)

    @model_validator(mode="after")
    def _check_complementary(self) -> "Figure":
        for idx, (line, moving, flipped) in enumerate(zip(self.lines, self.changing, self.complementary)):
            expected = 1 - line if moving else line
            if flipped != expected:
                raise ValueError(f"complementary line {idx} must be {expected}, got {flipped}")
        return self

    @property
    def lower_lines(self) -> tuple[int, int, int]:
        return (self.lines[0], self.lines[1], self.lines[2])

    @property
    def upper_lines(self) -> tuple[int, int, int]:
        return (self.lines[3], self.lines[4], self.lines[5])

    @property
    def changing_count(self) -> int:
        return sum(1 for flag in self.changing if flag)

    @property
    def changing_positions(self) -> list[int]:
        """1-indexed positions of the changing lines, bottom first."""
        return [idx + 1 for idx, flag in enumerate(self.changing) if flag]


class NumberGroup(BaseModel):
    """Five unique numbers plus one bonus number outside them."""

    index: int = Field(ge=0, le=4)
    numbers: list[Ball] = Field(min_length=5, max_length=5)
    bonus: Ball

    @model_validator(mode="after")
    def _check_unique(self) -> "NumberGroup":
        if len(set(self.numbers)) != len(self.numbers):
            raise ValueError(f"group {self.index} has duplicate numbers: {self.numbers}")
        if self.bonus in self.numbers:
            raise ValueError(f"group {self.index} bonus {self.bonus} repeats a main number")
        return self


class ExplanationRecord(BaseModel):
    """Why one drawn number fits the figure."""

    index: int = Field(ge=1)
    number: Ball
    attribute: Attribute
    line_position: int = Field(ge=1, le=6)
    line_value: Line
    changing: bool
    category: Category
    relation: Relation
    relation_label: str
    relation_text: str
    change_note: str
    reason: str


class DrawResult(BaseModel):
    """Everything one pipeline invocation produces, as plain data."""

    seed: str
    digest: str
    digest_strategy: str
    figure: Figure
    lower: Category
    upper: Category
    dominant: Attribute
    groups: list[NumberGroup] = Field(min_length=5, max_length=5)
    explanations: list[ExplanationRecord]
    alternatives: dict[int, list[Ball]] = Field(default_factory=dict)
