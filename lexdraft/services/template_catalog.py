"""
Static catalog of legal document templates and the form -> text renderer.
"""

from __future__ import annotations

import re
from datetime import date
from types import MappingProxyType
from typing import Mapping

from lexdraft.models.document_template import DocumentTemplate, TemplateField
from lexdraft.settings import settings
from lexdraft.logconf import logger

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

_FIR = DocumentTemplate(
    id="fir",
    name="First Information Report (FIR)",
    description="Standard police complaint registration form",
    category="Police",
    fields=(
        TemplateField("fir_number", "FIR Number", "text", True, "FIR/2024/001"),
        TemplateField("date_time", "Date and Time of Incident", "date", True),
        TemplateField("complainant_name", "Complainant Name", "text", True,
                      "Full name of complainant"),
        TemplateField("complainant_address", "Complainant Address", "textarea", True,
                      "Complete address with pin code"),
        TemplateField("complainant_phone", "Phone Number", "text", True, "+91-XXXXXXXXXX"),
        TemplateField("incident_location", "Place of Incident", "textarea", True,
                      "Detailed location where incident occurred"),
        TemplateField("incident_details", "Details of Incident", "textarea", True,
                      "Detailed description of what happened"),
        TemplateField("accused_details", "Details of Accused (if known)", "textarea", False,
                      "Name, address, and other details of accused person(s)"),
        TemplateField("witnesses", "Witness Details", "textarea", False,
                      "Names and contact details of witnesses"),
        TemplateField("property_stolen", "Property Stolen/Damaged", "textarea", False,
                      "List of items stolen or damaged with approximate value"),
        TemplateField("police_station", "Police Station", "text", True,
                      "Name of police station"),
        TemplateField("investigating_officer", "Investigating Officer", "text", True,
                      "Name and designation"),
    ),
    content="""
# FIRST INFORMATION REPORT (FIR)

**FIR No:** {{fir_number}}
**Date:** {{date_time}}
**Police Station:** {{police_station}}

## COMPLAINANT DETAILS
**Name:** {{complainant_name}}
**Address:** {{complainant_address}}
**Phone:** {{complainant_phone}}

## INCIDENT DETAILS
**Date and Time of Incident:** {{date_time}}
**Place of Incident:** {{incident_location}}

**Details of Incident:**
{{incident_details}}

## ACCUSED DETAILS
{{accused_details}}

## WITNESS DETAILS
{{witnesses}}

## PROPERTY DETAILS
{{property_stolen}}

## INVESTIGATION
**Investigating Officer:** {{investigating_officer}}

---
**Complainant Signature:** ________________
**Date:** ________________

**Receiving Officer:** ________________
**Signature:** ________________
**Date:** ________________
""",
)

_CHARGE_SHEET = DocumentTemplate(
    id="charge-sheet",
    name="Charge Sheet",
    description="Formal document containing charges against accused",
    category="Court",
    fields=(
        TemplateField("case_number", "Case Number", "text", True, "CC/2024/001"),
        TemplateField("court_name", "Court Name", "text", True, "Name of the court"),
        TemplateField("accused_name", "Name of Accused", "text", True, "Full name of accused"),
        TemplateField("accused_address", "Address of Accused", "textarea", True,
                      "Complete address of accused"),
        TemplateField("charges", "Charges/Sections", "textarea", True,
                      "IPC sections and charges (e.g., Section 302, 307 IPC)"),
        TemplateField("incident_date", "Date of Incident", "date", True),
        TemplateField("incident_summary", "Summary of Incident", "textarea", True,
                      "Brief summary of the incident"),
        TemplateField("evidence_summary", "Evidence Summary", "textarea", True,
                      "Summary of evidence collected"),
        TemplateField("investigation_summary", "Investigation Summary", "textarea", True,
                      "Summary of investigation conducted"),
        TemplateField("public_prosecutor", "Public Prosecutor", "text", True,
                      "Name of public prosecutor"),
    ),
    content="""
# CHARGE SHEET

**Case No:** {{case_number}}
**Court:** {{court_name}}
**Date:** {{current_date}}

## ACCUSED DETAILS
**Name:** {{accused_name}}
**Address:** {{accused_address}}

## CHARGES
**Sections:** {{charges}}
**Date of Incident:** {{incident_date}}

## INCIDENT SUMMARY
{{incident_summary}}

## EVIDENCE
{{evidence_summary}}

## INVESTIGATION
{{investigation_summary}}

## CONCLUSION
Based on the investigation and evidence collected, it is submitted that there is sufficient evidence to proceed against the accused under the mentioned sections.

**Public Prosecutor:** {{public_prosecutor}}
**Signature:** ________________
**Date:** ________________

**Investigating Officer:** ________________
**Signature:** ________________
**Date:** ________________
""",
)

_INVESTIGATION_REPORT = DocumentTemplate(
    id="investigation-report",
    name="Investigation Report",
    description="Comprehensive investigation findings report",
    category="Investigation",
    fields=(
        TemplateField("report_number", "Report Number", "text", True, "INV/2024/001"),
        TemplateField("case_title", "Case Title", "text", True, "Brief title of the case"),
        TemplateField("investigation_period", "Investigation Period", "text", True,
                      "From DD/MM/YYYY to DD/MM/YYYY"),
        TemplateField("investigating_team", "Investigating Team", "textarea", True,
                      "Names and designations of investigating officers"),
        TemplateField("case_background", "Case Background", "textarea", True,
                      "Background and context of the case"),
        TemplateField("investigation_methodology", "Investigation Methodology", "textarea", True,
                      "Methods and procedures used in investigation"),
        TemplateField("findings", "Key Findings", "textarea", True,
                      "Important findings from the investigation"),
        TemplateField("evidence_analysis", "Evidence Analysis", "textarea", True,
                      "Analysis of collected evidence"),
        TemplateField("conclusions", "Conclusions", "textarea", True,
                      "Conclusions drawn from the investigation"),
        TemplateField("recommendations", "Recommendations", "textarea", True,
                      "Recommendations for further action"),
    ),
    content="""
# INVESTIGATION REPORT

**Report No:** {{report_number}}
**Case:** {{case_title}}
**Investigation Period:** {{investigation_period}}
**Date of Report:** {{current_date}}

## INVESTIGATING TEAM
{{investigating_team}}

## CASE BACKGROUND
{{case_background}}

## INVESTIGATION METHODOLOGY
{{investigation_methodology}}

## KEY FINDINGS
{{findings}}

## EVIDENCE ANALYSIS
{{evidence_analysis}}

## CONCLUSIONS
{{conclusions}}

## RECOMMENDATIONS
{{recommendations}}

---
**Prepared by:** ________________
**Designation:** ________________
**Signature:** ________________
**Date:** ________________

**Reviewed by:** ________________
**Designation:** ________________
**Signature:** ________________
**Date:** ________________
""",
)

DOCUMENT_TEMPLATES: Mapping[str, DocumentTemplate] = MappingProxyType({
    t.id: t for t in (_FIR, _CHARGE_SHEET, _INVESTIGATION_REPORT)
})


def get_template(template_id: str) -> DocumentTemplate | None:
    return DOCUMENT_TEMPLATES.get(template_id)


def get_all_templates() -> list[DocumentTemplate]:
    return list(DOCUMENT_TEMPLATES.values())


def get_templates_by_category(category: str) -> list[DocumentTemplate]:
    if category == "All":
        return get_all_templates()
    return [t for t in DOCUMENT_TEMPLATES.values() if t.category == category]


def format_current_date(today: date | None = None) -> str:
    """d/m/yyyy, no zero padding."""
    today = today or date.today()
    return f"{today.day}/{today.month}/{today.year}"


def check_form(template: DocumentTemplate, form_data: Mapping[str, str]) -> dict[str, str]:
    """field id -> error message, for every required field left blank."""
    return {
        f.id: f"{f.label} is required"
        for f in template.required_fields
        if not (form_data.get(f.id) or "").strip()
    }


def render(
    template: DocumentTemplate,
    form_data: Mapping[str, str],
    current_date: str | None = None,
) -> str:
    values: dict[str, str] = {f.id: f.default_value or "" for f in template.fields}
    values.update(form_data)
    values["current_date"] = current_date or values.get("current_date") or format_current_date()

    def _fill(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return values[key] or settings.missing_value_text

    content = _PLACEHOLDER.sub(_fill, template.content).strip()
    logger.debug("Rendered template %s (%d chars)", template.id, len(content))
    return content
