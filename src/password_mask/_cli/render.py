from dataclasses import dataclass, field
from enum import StrEnum

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.text import Text

from ..dto import MaskDescription, ValidationResult


class RecordStyle(StrEnum):
    INFO = "steel_blue3"
    SUCCESS = "green"
    CRITICAL = "yellow"


@dataclass(slots=True)
class Record:
    content: str
    style: str = ""


@dataclass(slots=True)
class Section:
    title: str
    records: list[Record] = field(default_factory=list)

    def add(self, content: str, style: str = "") -> Record:
        record = Record(content=content, style=style)
        self.records.append(record)
        return record

    def compose_renderable(self) -> RenderableType:
        return Group(
            Text(f"[+] {self.title}"),
            Padding(
                Group(*(Text(f"=> {r.content}", style=r.style) for r in self.records)),
                (0, 0, 0, 1),
            ),
        )


def render_description(mask: str, description: MaskDescription) -> RenderableType:
    types = Section("Allowed character types for mask %r" % mask)
    for label in description.allowed_character_types:
        types.add(label, RecordStyle.INFO)
    if not description.allowed_character_types:
        types.add("none", RecordStyle.CRITICAL)

    rules = Section("Rules")
    for rule in description.rules:
        rules.add(rule, RecordStyle.INFO)

    return Group(types.compose_renderable(), rules.compose_renderable())


def render_validation(mask: str, result: ValidationResult) -> RenderableType:
    section = Section("Validating password against mask %r" % mask)

    if result.is_valid:
        section.add("valid", RecordStyle.SUCCESS)
    for error in result.errors:
        section.add(error, RecordStyle.CRITICAL)

    return section.compose_renderable()
