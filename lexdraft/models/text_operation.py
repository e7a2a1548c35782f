from dataclasses import dataclass, field
from enum import Enum

class TextOperationKind(str, Enum):
    GRAMMAR   = "grammar"
    CONCISE   = "concise"
    ELABORATE = "elaborate"
    REPHRASE  = "rephrase"
    SUMMARIZE = "summarize"
    TRANSLATE = "translate"


@dataclass(frozen=True)
class TextOperationRequest:
    text: str
    kind: TextOperationKind | str
    target_language: str | None = None


@dataclass
class TextOperationResult:
    original: str
    suggestion: str
    explanation: str
    confidence: float
    changes: list[str] = field(default_factory=list)
