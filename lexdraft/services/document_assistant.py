"""
Orchestrates the text rules, the validator and the template catalog.
Batch work (several rule kinds, a CSV register of documents) runs with
asyncio.gather on the default executor.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Mapping

import pandas as pd

from lexdraft.errors import FormValidationError, TemplateNotFoundError
from lexdraft.models.text_operation import (
    TextOperationKind,
    TextOperationRequest,
    TextOperationResult,
)
from lexdraft.models.validation_result import ValidationReport
from lexdraft.services import template_catalog
from lexdraft.services.document_validator import DocumentValidator
from lexdraft.services.text_processor import TextProcessor
from lexdraft.settings import settings
from lexdraft.logconf import logger
from lexdraft.utils.async_utils import run_sync
from lexdraft.utils.csv_utils import read_csv, write_csv

# Order of the editor toolbar; "suggest all" takes a prefix of it.
TOOLBAR_KINDS: tuple[TextOperationKind, ...] = (
    TextOperationKind.GRAMMAR,
    TextOperationKind.CONCISE,
    TextOperationKind.ELABORATE,
    TextOperationKind.REPHRASE,
    TextOperationKind.TRANSLATE,
    TextOperationKind.SUMMARIZE,
)


class DocumentAssistant:
    def __init__(
        self,
        title_col: str = settings.title_col,
        content_col: str = settings.content_col,
        doc_type_col: str = settings.doc_type_col,
        processor: TextProcessor | None = None,
        validator: DocumentValidator | None = None,
    ) -> None:
        self.processor = processor or TextProcessor()
        self.validator = validator or DocumentValidator()
        self.title_col = title_col
        self.content_col = content_col
        self.doc_type_col = doc_type_col
        self.sem = asyncio.Semaphore(settings.max_concurrency)

    # ------------------------------------------------------------------ #
    # Single document
    # ------------------------------------------------------------------ #
    def suggest(
        self, text: str, kind: TextOperationKind | str, language: str | None = None
    ) -> TextOperationResult:
        return self.processor.process(TextOperationRequest(text, kind, language))

    async def suggest_all(self, text: str, language: str | None = None) -> list[TextOperationResult]:
        """
        Runs the first `suggestion_batch_size` toolbar kinds over one
        fragment. Results come back in toolbar order.
        """
        kinds = TOOLBAR_KINDS[: settings.suggestion_batch_size]
        suggest = run_sync(self.suggest)
        results = await asyncio.gather(*(suggest(text, k, language) for k in kinds))
        return list(results)

    def review(self, title: str, content: str, document_type: str | None = None) -> ValidationReport:
        return self.validator.validate(content, title, document_type)

    def create_document(
        self,
        template_id: str,
        form_data: Mapping[str, str],
        title: str | None = None,
        current_date: str | None = None,
    ) -> tuple[str, str]:
        """
        Checks the form and renders the template.
        Returns (title, content).
        """
        template = template_catalog.get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        errors = template_catalog.check_form(template, form_data)
        if errors:
            raise FormValidationError(errors)

        content = template_catalog.render(template, form_data, current_date)
        return (title or template.default_title, content)

    # ------------------------------------------------------------------ #
    # CSV register
    # ------------------------------------------------------------------ #
    @staticmethod
    def _cell(row, col: str) -> str:
        value = row.get(col, "")
        return value if isinstance(value, str) else ""

    async def _validate_row(self, row_idx, row, df: pd.DataFrame) -> None:
        """
        One row = one task, guarded by the semaphore.
        """
        async with self.sem:
            report = await run_sync(self.review)(
                self._cell(row, self.title_col),
                self._cell(row, self.content_col),
                self._cell(row, self.doc_type_col) or None,
            )

        # update dataframe in-place
        df.at[row_idx, "completeness"]      = round(report.completeness, 2)
        df.at[row_idx, "missing_rules"]     = ", ".join(r.rule_id for r in report.issues)
        df.at[row_idx, "validation_status"] = "complete" if not report.issues else "incomplete"

    async def validate_register(
        self,
        input_path: str | Path,
        output_path: str | Path,
    ) -> pd.DataFrame:
        df = read_csv(input_path)
        if self.content_col not in df.columns:
            logger.error("Column %r missing from %s", self.content_col, input_path)
            raise ValueError(f"Missing content column: {self.content_col}")

        # ensure all result columns are present
        result_cols = {
            "completeness":      0.0,
            "missing_rules":     "",
            "validation_status": "",
        }
        for col, default in result_cols.items():
            df[col] = default

        tasks = [
            self._validate_row(idx, df.loc[idx].copy(), df)
            for idx in df.index
        ]
        await asyncio.gather(*tasks)
        await write_csv(df, output_path)

        incomplete = int((df["validation_status"] == "incomplete").sum())
        logger.info(
            "Register validated (%s → %s): %d documents, %d incomplete",
            input_path, output_path, len(df), incomplete,
        )
        return df
