from dataclasses import asdict
from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from lexdraft.errors import FormValidationError, TemplateNotFoundError
from lexdraft.services import template_catalog
from lexdraft.services.document_assistant import DocumentAssistant
from lexdraft.logconf import logger

app = FastAPI(title="Legal Document Drafting Tools")

assistant = DocumentAssistant()


class ProcessRequest(BaseModel):
    text: str
    kind: str
    target_language: Optional[str] = None

class SuggestionsRequest(BaseModel):
    text: str
    language: Optional[str] = None

class ValidateRequest(BaseModel):
    text: str
    title: str = ""
    document_type: Optional[str] = None

class RenderRequest(BaseModel):
    form_data: Dict[str, str] = Field(default_factory=dict)
    title: Optional[str] = None

class RegisterRequest(BaseModel):
    input_path: str
    output_path: str
    title_col: Optional[str] = None
    content_col: Optional[str] = None
    doc_type_col: Optional[str] = None


def _template_summary(t) -> dict:
    return {"id": t.id, "name": t.name, "description": t.description, "category": t.category}


@app.post("/process")
async def process_endpoint(request: ProcessRequest):
    return asdict(assistant.suggest(request.text, request.kind, request.target_language))

@app.post("/suggestions")
async def suggestions_endpoint(request: SuggestionsRequest):
    results = await assistant.suggest_all(request.text, request.language)
    return [asdict(r) for r in results]

@app.post("/validate")
async def validate_endpoint(request: ValidateRequest):
    report = assistant.review(request.title, request.text, request.document_type)
    return {
        "document_type": report.document_type,
        "completeness": report.completeness,
        "results": [asdict(r) for r in report.results],
    }

@app.get("/templates")
async def list_templates(category: str = "All"):
    return [_template_summary(t) for t in template_catalog.get_templates_by_category(category)]

@app.get("/templates/{template_id}")
async def get_template(template_id: str):
    template = template_catalog.get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Unknown template: {template_id}")
    return {
        **_template_summary(template),
        "fields": [asdict(f) for f in template.fields],
    }

@app.post("/templates/{template_id}/render")
async def render_template(template_id: str, request: RenderRequest):
    try:
        title, content = assistant.create_document(template_id, request.form_data, request.title)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FormValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    return {"title": title, "content": content}

@app.post("/registers/validate")
async def validate_register_endpoint(request: RegisterRequest):
    register_args = {}
    if request.title_col:
        register_args["title_col"] = request.title_col
    if request.content_col:
        register_args["content_col"] = request.content_col
    if request.doc_type_col:
        register_args["doc_type_col"] = request.doc_type_col

    register_assistant = DocumentAssistant(**register_args)
    try:
        input_p = Path(request.input_path)
        output_p = Path(request.output_path)

        # Ensure the output directory exists
        output_p.parent.mkdir(parents=True, exist_ok=True)

        df = await register_assistant.validate_register(input_p, output_p)
        incomplete = int((df["validation_status"] == "incomplete").sum())
        return {
            "message": f"Register validated. Input: {request.input_path}, Output: {request.output_path}",
            "documents": len(df),
            "incomplete": incomplete,
        }
    except FileNotFoundError:
        logger.error(f"Input file not found: {request.input_path}")
        return {"error": f"Input file not found: {request.input_path}"}
    except ValueError as e:
        logger.error(f"Register rejected: {e}")
        return {"error": str(e)}

@app.get("/")
async def root():
    return {"message": "Legal document drafting API is running."}
