import pytest

from lexdraft.models.validation_result import ValidationRule
from lexdraft.services.document_validator import DocumentValidator, VALIDATION_RULES


@pytest.fixture
def validator():
    return DocumentValidator()


def test_fir_without_keywords_fails_every_required_rule(validator):
    report = validator.validate("Nothing to see here.", "Draft", "fir")
    assert [r.rule_id for r in report.results] == [r.id for r in VALIDATION_RULES["fir"]]
    assert all(not r.passed for r in report.results)
    assert report.completeness == 0
    assert len(report.issues) == 5


def test_failed_keyword_rule_suggests_first_keyword(validator):
    report = validator.validate("Nothing to see here.", "Draft", "fir")
    first = report.results[0]
    assert first.message == "Missing keywords: complainant, name"
    assert first.suggestions == [
        "Add complainant information",
        "This field is required for fir documents",
    ]


def test_fir_with_all_keywords_is_complete(validator):
    text = "The complainant reported the incident on the date given, at the place near the police station."
    report = validator.validate(text, "FIR", "fir")
    assert all(r.passed for r in report.results)
    assert report.completeness == 100
    assert report.issues == []


def test_keyword_match_is_case_insensitive_and_includes_title(validator):
    report = validator.validate("", "COMPLAINANT NAME: Ravi", "fir")
    first = report.results[0]
    assert first.passed
    assert first.message == "Found: complainant, name"
    assert first.suggestions == []
    assert report.completeness == 20


def test_unknown_type_falls_back_to_default_rules(validator):
    report = validator.validate("Notice", "", "affidavit")
    assert [r.rule_id for r in report.results] == ["title_present", "date_present", "signature_line"]
    assert report.document_type == "affidavit"
    assert "This field is required for affidavit documents" in report.results[0].suggestions


@pytest.mark.parametrize("document_type", [None, ""])
def test_missing_type_uses_default(validator, document_type):
    report = validator.validate("Notice", "", document_type)
    assert report.document_type == "default"
    assert len(report.results) == 3


@pytest.mark.parametrize("text", ["Signed on 12 March 2024", "Signed on 12/03/2024", "dated 1-2-24"])
def test_date_pattern_rule(validator, text):
    report = validator.validate(text, "Title", "default")
    date_rule = report.results[1]
    assert date_rule.passed
    assert date_rule.message == "Pattern found"
    assert report.completeness == 100


def test_pattern_rule_failure(validator):
    report = validator.validate("no dates here", "Title", "default")
    date_rule = report.results[1]
    assert not date_rule.passed
    assert date_rule.message == "Required pattern not found"
    assert date_rule.suggestions == ["This field is required for default documents"]
    assert report.completeness == 50


def test_optional_rule_does_not_affect_completeness(validator):
    report = validator.validate("dated 12/03/2024", "Title", "default")
    signature = report.results[2]
    assert not signature.passed and not signature.required
    assert signature.suggestions == ["Add signature information"]
    assert report.completeness == 100


def test_no_required_rules_means_complete():
    optional = ValidationRule("sig", "Signature", "", False, keywords=("sign",))
    report = DocumentValidator(rule_sets={"default": (optional,)}).validate("", "", "x")
    assert report.required_total == 0
    assert report.completeness == 100


def test_investigation_report_rules(validator):
    text = "Case details and findings. We recommend closure. Officer: Insp. Rao"
    report = validator.validate(text, "Report", "investigation-report")
    assert report.completeness == 100


def test_required_fields_check_lists_missing_fields():
    content = "Complainant: Ravi. Accused: unknown. Incident at the market."
    check = DocumentValidator.check_required_fields(content, "fir")
    assert check.missing_fields == ["date", "place", "police station"]
    assert check.suggestions[0] == "Add date information"
    assert check.completeness == 50


def test_required_fields_check_unknown_type():
    check = DocumentValidator.check_required_fields("anything", "will")
    assert check.completeness == 100
    assert check.missing_fields == []
