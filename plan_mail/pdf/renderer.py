"""
Plan-to-document rendering.

Turns a plan mapping into pages of positioned text draws. Nothing here does
I/O; `plan_mail.pdf.writer` turns the result into PDF bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Sequence, Tuple

from plan_mail.config.constants import (
    BOTTOM_MARGIN,
    DOCUMENT_TITLE,
    MARGIN_LEFT,
    NAME_PLACEHOLDER,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    TOP_OFFSET,
)
from plan_mail.plan.fields import _as_text, _split_lines, day_exercises, day_title, exercise_fields

Color = Tuple[float, float, float]
BLACK: Color = (0.0, 0.0, 0.0)
ACCENT: Color = (0.12, 0.31, 0.47)
MUTED: Color = (0.35, 0.35, 0.35)


@dataclass(frozen=True)
class TextStyle:
    size: float
    gap: float
    font: str = "Helvetica"
    indent: float = 0
    color: Color = BLACK

    @property
    def step(self) -> float:
        return self.size + self.gap


TITLE_STYLE = TextStyle(size=18, gap=12, font="Helvetica-Bold", color=ACCENT)
GREETING_STYLE = TextStyle(size=14, gap=16)
HEADING_STYLE = TextStyle(size=13, gap=8, font="Helvetica-Bold", color=ACCENT)
BODY_STYLE = TextStyle(size=12, gap=8)
DAY_STYLE = TextStyle(size=12, gap=8, font="Helvetica-Bold")
EXERCISE_STYLE = TextStyle(size=11, gap=6, indent=12)
HOW_TO_STYLE = TextStyle(size=10, gap=4, indent=28, color=MUTED)


@dataclass(frozen=True)
class PageLayout:
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    margin_left: float = MARGIN_LEFT
    top: float = TOP_OFFSET
    bottom: float = BOTTOM_MARGIN

    def __post_init__(self) -> None:
        if self.top <= self.bottom:
            raise ValueError("Top offset must be above the bottom margin.")

    def capacity(self, style: TextStyle) -> int:
        """Number of lines in `style` that fit on one page."""
        return int((self.top - self.bottom) // style.step) + 1


DEFAULT_LAYOUT = PageLayout()


@dataclass(frozen=True)
class Line:
    text: str
    style: TextStyle = BODY_STYLE


@dataclass(frozen=True)
class DrawInstruction:
    text: str
    x: float
    y: float
    font_size: float
    color: Color = BLACK
    font: str = "Helvetica"


@dataclass(frozen=True)
class RenderCursor:
    page: int
    y: float


@dataclass
class Document:
    pages: List[List[DrawInstruction]]
    layout: PageLayout = DEFAULT_LAYOUT
    title: str = DOCUMENT_TITLE

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def instructions(self) -> List[DrawInstruction]:
        return [instruction for page in self.pages for instruction in page]

    def texts(self) -> List[str]:
        return [instruction.text for instruction in self.instructions()]


def _place(cursor: RenderCursor, layout: PageLayout) -> RenderCursor:
    if cursor.y < layout.bottom:
        return RenderCursor(page=cursor.page + 1, y=layout.top)
    return cursor


def _advance(cursor: RenderCursor, style: TextStyle) -> RenderCursor:
    return replace(cursor, y=cursor.y - style.step)


def paginate(lines: Sequence[Line], layout: PageLayout = DEFAULT_LAYOUT, title: str = DOCUMENT_TITLE) -> Document:
    pages: List[List[DrawInstruction]] = [[]]
    cursor = RenderCursor(page=0, y=layout.top)
    for line in lines:
        cursor = _place(cursor, layout)
        if cursor.page == len(pages):
            pages.append([])
        style = line.style
        pages[cursor.page].append(
            DrawInstruction(
                text=line.text,
                x=layout.margin_left + style.indent,
                y=cursor.y,
                font_size=style.size,
                color=style.color,
                font=style.font,
            )
        )
        cursor = _advance(cursor, style)
    return Document(pages=pages, layout=layout, title=title)


def _text_section(value: Any) -> List[Line]:
    return [Line(text) for text in _split_lines(value)]


def _schedule_section(schedule: Any) -> List[Line]:
    if not isinstance(schedule, list):
        return []
    lines: List[Line] = []
    for index, day in enumerate(schedule, start=1):
        lines.append(Line(f"Day {index}: {day_title(day)}", DAY_STYLE))
        for exercise in day_exercises(day):
            fields = exercise_fields(exercise)
            text = f"- {fields['name']}"
            if fields["sets"] or fields["reps"]:
                text += f": {fields['sets']} x {fields['reps']}"
            if fields["time"]:
                text += f" ({fields['time']})"
            lines.append(Line(text, EXERCISE_STYLE))
            lines.extend(Line(step, HOW_TO_STYLE) for step in _split_lines(fields["how_to"]))
    return lines


def _targets_section(targets: Any) -> List[Line]:
    if not isinstance(targets, dict) or not targets:
        return []
    return [
        Line(f"Calories: {_as_text(targets.get('calories'))}"),
        Line(f"Protein (g): {_as_text(targets.get('protein'))}"),
        Line(f"Steps: {_as_text(targets.get('steps'))}"),
    ]


def plan_sections(plan: dict[str, Any]) -> List[Tuple[str, List[Line]]]:
    """Ordered (heading, lines) pairs; a section with no lines is absent."""
    return [
        ("Summary", _text_section(plan.get("summary"))),
        ("Warm-up", _text_section(plan.get("warmup"))),
        ("Weekly Schedule", _schedule_section(plan.get("schedule"))),
        ("Cardio", _text_section(plan.get("cardio"))),
        ("Cool-down", _text_section(plan.get("cooldown"))),
        ("Notes", _text_section(plan.get("notes"))),
        ("Targets", _targets_section(plan.get("targets"))),
    ]


def greeting(display_name: Any) -> str:
    name = _as_text(display_name).strip() or NAME_PLACEHOLDER
    return f"Hi {name}, here's your full program:"


def plan_lines(plan: dict[str, Any], display_name: Any = None, title: str = DOCUMENT_TITLE) -> List[Line]:
    if not isinstance(plan, dict):
        raise TypeError(f"Plan must be an object, got {type(plan).__name__}.")
    lines = [Line(title, TITLE_STYLE), Line(greeting(display_name), GREETING_STYLE)]
    for heading, section in plan_sections(plan):
        if not section:
            continue
        lines.append(Line(f"{heading}:", HEADING_STYLE))
        lines.extend(section)
    return lines


def render(plan: dict[str, Any], display_name: Any = None, layout: PageLayout = DEFAULT_LAYOUT) -> Document:
    return paginate(plan_lines(plan, display_name), layout)
