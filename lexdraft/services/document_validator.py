"""
Heuristic completeness checks for drafted documents.

Rules are keyword or regex presence tests against the lower-cased
"title + body" text; nothing here understands the document.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Sequence

from lexdraft.models.validation_result import (
    FieldCheck,
    ValidationReport,
    ValidationResult,
    ValidationRule,
)
from lexdraft.settings import settings
from lexdraft.logconf import logger

_MONTHS = (
    "Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec|January|February|March|April|"
    "May|June|July|August|September|October|November|December"
)
DATE_PATTERN = re.compile(
    rf"\d{{1,2}}[/\-.]\d{{1,2}}[/\-.]\d{{2,4}}|\d{{1,2}}\s+({_MONTHS})\s+\d{{2,4}}",
    re.IGNORECASE,
)

VALIDATION_RULES: Mapping[str, tuple[ValidationRule, ...]] = MappingProxyType({
    "fir": (
        ValidationRule("complainant_name", "Complainant Name",
                       "Document must contain complainant's name", True,
                       keywords=("complainant", "name")),
        ValidationRule("date_time", "Date and Time",
                       "Incident date and time must be specified", True,
                       keywords=("date", "time", "occurred", "happened")),
        ValidationRule("location", "Location Details",
                       "Place of incident must be mentioned", True,
                       keywords=("place", "location", "address", "occurred at")),
        ValidationRule("incident_details", "Incident Description",
                       "Detailed description of the incident", True,
                       keywords=("incident", "details", "what happened", "description")),
        ValidationRule("police_station", "Police Station",
                       "Police station name must be mentioned", True,
                       keywords=("police station", "station")),
    ),
    "charge-sheet": (
        ValidationRule("accused_name", "Accused Details",
                       "Name and details of accused person(s)", True,
                       keywords=("accused", "defendant", "name")),
        ValidationRule("charges", "Legal Charges",
                       "Specific charges and IPC sections", True,
                       keywords=("section", "ipc", "charges", "under")),
        ValidationRule("evidence", "Evidence Summary",
                       "Summary of evidence collected", True,
                       keywords=("evidence", "proof", "witness", "material")),
        ValidationRule("court_name", "Court Details",
                       "Name of the court", True,
                       keywords=("court", "honorable", "magistrate")),
    ),
    "investigation-report": (
        ValidationRule("case_details", "Case Details",
                       "Background and details of the case", True,
                       keywords=("case details", "case background", "case")),
        ValidationRule("findings", "Findings",
                       "Key findings of the investigation", True,
                       keywords=("findings", "found")),
        ValidationRule("recommendations", "Recommendations",
                       "Recommendations for further action", True,
                       keywords=("recommendations", "recommend")),
        ValidationRule("officer", "Investigating Officer",
                       "Officer or team who conducted the investigation", True,
                       keywords=("officer", "investigating team", "inspector")),
    ),
    "default": (
        ValidationRule("title_present", "Document Title",
                       "Document should have a clear title", True,
                       keywords=("title", "heading")),
        ValidationRule("date_present", "Date",
                       "Document should contain a date", True,
                       pattern=DATE_PATTERN),
        ValidationRule("signature_line", "Signature Line",
                       "Document should have signature lines", False,
                       keywords=("signature", "signed", "sign")),
    ),
})

# Field names that rendered content of each template type should mention.
REQUIRED_FIELDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "fir": ("complainant", "accused", "incident", "date", "place", "police station"),
    "charge-sheet": ("accused", "charges", "evidence", "court", "case number"),
    "investigation-report": ("case details", "findings", "recommendations", "officer"),
})


class DocumentValidator:
    def __init__(
        self,
        rule_sets: Mapping[str, Sequence[ValidationRule]] | None = None,
        default_key: str | None = None,
    ) -> None:
        self._rule_sets = rule_sets if rule_sets is not None else VALIDATION_RULES
        self._default_key = default_key or settings.default_document_type

    def rules_for(self, document_type: str | None) -> Sequence[ValidationRule]:
        if document_type and document_type in self._rule_sets:
            return self._rule_sets[document_type]
        return self._rule_sets.get(self._default_key, ())

    def validate(
        self, text: str, title: str = "", document_type: str | None = None
    ) -> ValidationReport:
        doc_type = document_type or self._default_key
        full_text = f"{title} {text}".lower()
        results = [
            self._check(rule, full_text, doc_type) for rule in self.rules_for(doc_type)
        ]
        report = ValidationReport(doc_type, results)
        logger.debug(
            "Validated %s document: %d/%d required rules passed",
            doc_type, report.required_passed, report.required_total,
        )
        return report

    @staticmethod
    def _check(rule: ValidationRule, full_text: str, doc_type: str) -> ValidationResult:
        passed = False
        message = ""
        suggestions: list[str] = []

        if rule.pattern is not None:
            passed = bool(rule.pattern.search(full_text))
            message = "Pattern found" if passed else "Required pattern not found"
        elif rule.keywords:
            found = [k for k in rule.keywords if k.lower() in full_text]
            passed = bool(found)
            if passed:
                message = f"Found: {', '.join(found)}"
            else:
                message = f"Missing keywords: {', '.join(rule.keywords)}"
                suggestions.append(f"Add {rule.keywords[0]} information")

        if not passed and rule.required:
            suggestions.append(f"This field is required for {doc_type} documents")

        return ValidationResult(rule.id, rule.label, rule.required, passed, message, suggestions)

    # ------------------------------------------------------------------ #
    # Field presence
    # ------------------------------------------------------------------ #
    @staticmethod
    def check_required_fields(content: str, template_type: str) -> FieldCheck:
        """
        Looks for each required field name of the template type in the
        content. Unknown types have nothing to check and score 100.
        """
        fields = REQUIRED_FIELDS.get(template_type, ())
        missing = [f for f in fields if not re.search(re.escape(f), content, re.IGNORECASE)]
        if not fields:
            return FieldCheck(100)
        completeness = round((len(fields) - len(missing)) / len(fields) * 100)
        return FieldCheck(
            completeness=completeness,
            missing_fields=missing,
            suggestions=[f"Add {f} information" for f in missing],
        )
