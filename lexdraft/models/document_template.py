from dataclasses import dataclass
from typing import Literal

FieldType = Literal["text", "textarea", "date", "select", "number"]

@dataclass(frozen=True)
class TemplateField:
    id: str
    label: str
    type: FieldType
    required: bool
    placeholder: str | None = None
    options: tuple[str, ...] | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class DocumentTemplate:
    id: str
    name: str
    description: str
    category: str
    fields: tuple[TemplateField, ...]
    content: str

    @property
    def required_fields(self) -> list[TemplateField]:
        return [f for f in self.fields if f.required]

    @property
    def default_title(self) -> str:
        return f"New {self.name}"
