class LexdraftError(Exception):
    """Base error for the document tooling."""


class TemplateNotFoundError(LexdraftError):
    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown template: {template_id}")
        self.template_id = template_id


class FormValidationError(LexdraftError):
    """Raised when required template fields are left empty."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(errors.values()))
        self.errors = errors
