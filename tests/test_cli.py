import json

import pandas as pd

from lexdraft.cli.draft import main


def test_process_prints_result(capsys):
    assert main(["process", "translate", "-l", "tamil", "-t", "The police filed a report"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["suggestion"] == "The காவல்துறை filed a அறிக்கை"


def test_process_reads_file(tmp_path, capsys):
    src = tmp_path / "note.txt"
    src.write_text("A. B. C. D.", encoding="utf-8")
    assert main(["process", "summarize", "-f", str(src)]) == 0
    assert json.loads(capsys.readouterr().out)["suggestion"] == "A. D."


def test_suggest(capsys):
    assert main(["suggest", "-t", "i agree"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 4


def test_validate(capsys):
    assert main(["validate", "--type", "fir", "--title", "Draft", "-t", "Nothing to see here."]) == 0
    assert json.loads(capsys.readouterr().out)["completeness"] == 0


def test_templates_listing(capsys):
    assert main(["templates", "--category", "Investigation"]) == 0
    assert capsys.readouterr().out.startswith("investigation-report\tInvestigation\t")


def test_render_missing_fields(capsys):
    assert main(["render", "fir", "--field", "fir_number=FIR/1"]) == 1
    err = capsys.readouterr().err
    assert "Complainant Name is required" in err
    assert "FIR Number is required" not in err


def test_render_unknown_template(capsys):
    assert main(["render", "will"]) == 1
    assert "Unknown template: will" in capsys.readouterr().err


def test_render_bad_field_syntax(capsys):
    assert main(["render", "fir", "--field", "oops"]) == 1


def test_validate_register(tmp_path):
    src = tmp_path / "docs.csv"
    out = tmp_path / "validated.csv"
    pd.DataFrame([{"title": "FIR", "content": "nothing", "document_type": "fir"}]).to_csv(src, index=False)
    assert main(["validate-register", "-i", str(src), "-o", str(out)]) == 0
    assert pd.read_csv(out)["validation_status"].tolist() == ["incomplete"]


def test_validate_register_missing_file(tmp_path):
    assert main(["validate-register", "-i", str(tmp_path / "absent.csv"), "-o", str(tmp_path / "o.csv")]) == 1
