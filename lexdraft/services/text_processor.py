"""
Deterministic, explainable rewrites for fragments of legal text.

Every kind is an ordered list of regex substitutions; later rules see the
output of earlier ones. Word boundaries are ASCII so that Tamil text already
substituted into a fragment never counts as a word character.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable

from lexdraft.models.text_operation import (
    TextOperationKind,
    TextOperationRequest,
    TextOperationResult,
)
from lexdraft.settings import settings
from lexdraft.logconf import logger

_FLAGS = re.ASCII
_IFLAGS = re.ASCII | re.IGNORECASE

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"[.!?]+")

_LONE_I = re.compile(r"\bi\b", _FLAGS)
_SENTENCE_START = re.compile(r"([.!?])\s*([a-z])")

_CONCISE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\b(very|really|quite|rather|extremely)\s+", _IFLAGS), ""),
    (re.compile(r"\b(in order to|so as to)\b", _IFLAGS), "to"),
    (re.compile(r"\b(due to the fact that|owing to the fact that)\b", _IFLAGS), "because"),
)

_REPHRASE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\bThe accused\b", _IFLAGS), "The defendant"),
    (re.compile(r"\bThe complainant\b", _IFLAGS), "The plaintiff"),
    (re.compile(r"\bIt is alleged that\b", _IFLAGS), "According to the complaint"),
    (re.compile(r"\bOn the said date\b", _IFLAGS), "On the aforementioned date"),
)

ELABORATION_SUFFIX = " with proper documentation and evidence"
SHORT_SENTENCE_LEN = 20
SUMMARY_MIN_SENTENCES = 4

# English -> Tamil, applied in this order
TAMIL_GLOSSARY = MappingProxyType({
    "complaint":     "புகார்",
    "accused":       "குற்றம் சாட்டப்பட்டவர்",
    "police":        "காவல்துறை",
    "court":         "நீதிமன்றம்",
    "evidence":      "சாட்சி",
    "witness":       "சாட்சி",
    "case":          "வழக்கு",
    "investigation": "விசாரணை",
    "report":        "அறிக்கை",
    "date":          "தேதி",
    "time":          "நேரம்",
    "place":         "இடம்",
    "name":          "பெயர்",
    "address":       "முகவரி",
})

_TAMIL_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(rf"\b{re.escape(english)}\b", _IFLAGS), tamil)
    for english, tamil in TAMIL_GLOSSARY.items()
)


def split_sentences(text: str) -> list[str]:
    """Non-empty sentences, stripped, terminal punctuation removed."""
    return [s.strip() for s in _SENTENCE_BREAK.split(text) if s.strip()]


def _apply(rules: tuple[tuple[re.Pattern, str], ...], text: str) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


class TextProcessor:
    """Stateless: instantiate freely, share freely."""

    def process(self, request: TextOperationRequest) -> TextOperationResult:
        text = request.text
        try:
            kind = TextOperationKind(request.kind)
        except ValueError:
            logger.debug("Unknown text operation %r, returning input", request.kind)
            return TextOperationResult(text, text, "No processing applied", 1.0, [])

        if kind is TextOperationKind.TRANSLATE:
            return self.translate(text, request.target_language or settings.default_target_language)

        handler: Callable[[str], TextOperationResult] = getattr(self, _HANDLERS[kind])
        return handler(text)

    # ------------------------------------------------------------------ #
    # Rule kinds
    # ------------------------------------------------------------------ #
    def fix_grammar(self, text: str) -> TextOperationResult:
        suggestion = _LONE_I.sub("I", text)
        suggestion = _WHITESPACE.sub(" ", suggestion)
        suggestion = _SENTENCE_START.sub(
            lambda m: f"{m.group(1)} {m.group(2).upper()}", suggestion
        ).strip()
        return TextOperationResult(
            original=text,
            suggestion=suggestion,
            explanation="Applied basic grammar corrections",
            confidence=0.8,
            changes=["Capitalized 'I'", "Fixed spacing", "Capitalized sentences"],
        )

    def make_concise(self, text: str) -> TextOperationResult:
        suggestion = _WHITESPACE.sub(" ", _apply(_CONCISE_RULES, text)).strip()
        return TextOperationResult(
            original=text,
            suggestion=suggestion,
            explanation="Removed redundant words and phrases",
            confidence=0.9,
            changes=["Removed filler words", "Simplified phrases"],
        )

    def elaborate(self, text: str) -> TextOperationResult:
        sentences = [
            s + ELABORATION_SUFFIX if len(s) < SHORT_SENTENCE_LEN else s
            for s in split_sentences(text)
        ]
        return TextOperationResult(
            original=text,
            suggestion=". ".join(sentences) + ".",
            explanation="Added detail to short sentences",
            confidence=0.7,
            changes=["Extended short sentences", "Added context"],
        )

    def rephrase(self, text: str) -> TextOperationResult:
        return TextOperationResult(
            original=text,
            suggestion=_apply(_REPHRASE_RULES, text),
            explanation="Rephrased using legal terminology",
            confidence=0.8,
            changes=["Used formal legal terms", "Improved sentence structure"],
        )

    def summarize(self, text: str) -> TextOperationResult:
        sentences = split_sentences(text)
        suggestion = text
        if len(sentences) >= SUMMARY_MIN_SENTENCES:
            suggestion = f"{sentences[0]}. {sentences[-1]}."
        return TextOperationResult(
            original=text,
            suggestion=suggestion,
            explanation="Created summary using key sentences",
            confidence=0.6,
            changes=["Extracted key points", "Reduced length"],
        )

    def translate(self, text: str, target_language: str) -> TextOperationResult:
        suggestion = text
        if target_language.strip().lower() == "tamil":
            suggestion = _apply(_TAMIL_RULES, text)
        return TextOperationResult(
            original=text,
            suggestion=suggestion,
            explanation=f"Translated key terms to {target_language}",
            confidence=0.7,
            changes=["Translated legal terms", "Maintained document structure"],
        )


_HANDLERS = MappingProxyType({
    TextOperationKind.GRAMMAR:   "fix_grammar",
    TextOperationKind.CONCISE:   "make_concise",
    TextOperationKind.ELABORATE: "elaborate",
    TextOperationKind.REPHRASE:  "rephrase",
    TextOperationKind.SUMMARIZE: "summarize",
})


def process_text(
    text: str, kind: TextOperationKind | str, target_language: str | None = None
) -> TextOperationResult:
    return TextProcessor().process(TextOperationRequest(text, kind, target_language))
