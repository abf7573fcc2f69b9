from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

Direction = Literal["ltr", "rtl"]


class Fragment(BaseModel):
    """Raw positioned text run as handed over by the page text extractor."""

    text: str
    direction: Direction = "ltr"
    width: float
    height: float
    transform: tuple[float, float, float, float, float, float]
    font_name: str = ""
    has_eol: bool = False


class Viewport(BaseModel):
    width: float
    height: float
    transform: tuple[float, float, float, float, float, float]


class TextContent(BaseModel):
    fragments: list[Fragment] = Field(default_factory=list)
    language: str = ""


class BBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def middle_y(self) -> float:
        return (self.y0 + self.y1) / 2.0


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class WordMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: Direction = "ltr"
    font_name: str = ""
    font_size: float = 0.0
    has_eol: bool = False
    page_num: int = 1


class Word(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    bbox: BBox
    dimension: Dimension
    metadata: WordMetadata
    id: Optional[int] = None  # dense per page, set by the region filter


class CompactWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    bbox: BBox


class Line(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    bbox: BBox
    dimension: Dimension
    average_font_size: float
    words: list[Word]


class CompactLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    bbox: BBox
    words: list[CompactWord]


class PageText(BaseModel):
    words: list[Word] = Field(default_factory=list)
    lang: str = ""


# Page collections are keyed by the 1-based page number.
PageTexts = dict[int, PageText]
PageLines = dict[int, list[Line]]
CompactPageLines = dict[int, list[CompactLine]]
