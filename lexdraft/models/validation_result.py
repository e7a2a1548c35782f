import re
from dataclasses import dataclass, field

@dataclass(frozen=True)
class ValidationRule:
    id: str
    label: str
    description: str
    required: bool
    keywords: tuple[str, ...] | None = None
    pattern: re.Pattern | None = None


@dataclass
class ValidationResult:
    rule_id: str
    label: str
    required: bool
    passed: bool
    message: str
    suggestions: list[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    document_type: str
    results: list[ValidationResult] = field(default_factory=list)

    @property
    def required_total(self) -> int:
        return sum(1 for r in self.results if r.required)

    @property
    def required_passed(self) -> int:
        return sum(1 for r in self.results if r.required and r.passed)

    @property
    def issues(self) -> list[ValidationResult]:
        """Required rules that failed."""
        return [r for r in self.results if r.required and not r.passed]

    @property
    def completeness(self) -> float:
        if not self.required_total:
            return 100.0
        return self.required_passed / self.required_total * 100


@dataclass
class FieldCheck:
    completeness: int
    missing_fields: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
