import asyncio, argparse, json, sys
from dataclasses import asdict
from pathlib import Path
from lexdraft.errors import FormValidationError, TemplateNotFoundError
from lexdraft.models.text_operation import TextOperationKind
from lexdraft.services import template_catalog
from lexdraft.services.document_assistant import DocumentAssistant
from lexdraft.logconf import logger

def _dump(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))

def _read_text(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return args.text or ""

def _report_dict(report) -> dict:
    return {
        "document_type": report.document_type,
        "completeness": report.completeness,
        "results": [asdict(r) for r in report.results],
    }

def _parse_fields(pairs: list[str]) -> dict[str, str]:
    form = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        form[key.strip()] = value
    return form

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Draft and check legal documents with rule-based tools."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_text_args(p):
        src = p.add_mutually_exclusive_group()
        src.add_argument("-t", "--text", help="Text to work on")
        src.add_argument("-f", "--file", help="Read the text from a UTF-8 file")

    p = sub.add_parser("process", help="Apply one text rule")
    p.add_argument("kind", help=", ".join(k.value for k in TextOperationKind))
    p.add_argument("-l", "--language", help="Target language for translate")
    add_text_args(p)

    p = sub.add_parser("suggest", help="Run the toolbar batch of text rules")
    p.add_argument("-l", "--language")
    add_text_args(p)

    p = sub.add_parser("validate", help="Check a document for required content")
    p.add_argument("--type", dest="document_type", default=None)
    p.add_argument("--title", default="")
    add_text_args(p)

    p = sub.add_parser("templates", help="List document templates")
    p.add_argument("--category", default="All")

    p = sub.add_parser("render", help="Fill a template from key=value fields")
    p.add_argument("template_id")
    p.add_argument("--field", action="append", default=[], metavar="KEY=VALUE")
    p.add_argument("--title")

    p = sub.add_parser("validate-register", help="Validate a CSV register of documents")
    p.add_argument("-i", "--input", default="data/documents.csv")
    p.add_argument("-o", "--output", default="data/documents_validated.csv")
    p.add_argument("--title-col", help="Name of the title column")
    p.add_argument("--content-col", help="Name of the content column")
    p.add_argument("--type-col", help="Name of the document type column")
    return parser

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    assistant_args = {}
    if getattr(args, "title_col", None):
        assistant_args["title_col"] = args.title_col
    if getattr(args, "content_col", None):
        assistant_args["content_col"] = args.content_col
    if getattr(args, "type_col", None):
        assistant_args["doc_type_col"] = args.type_col
    assistant = DocumentAssistant(**assistant_args)

    if args.command == "process":
        _dump(asdict(assistant.suggest(_read_text(args), args.kind, args.language)))
    elif args.command == "suggest":
        results = asyncio.run(assistant.suggest_all(_read_text(args), args.language))
        _dump([asdict(r) for r in results])
    elif args.command == "validate":
        _dump(_report_dict(assistant.review(args.title, _read_text(args), args.document_type)))
    elif args.command == "templates":
        for t in template_catalog.get_templates_by_category(args.category):
            print(f"{t.id}\t{t.category}\t{t.name}")
    elif args.command == "render":
        try:
            title, content = assistant.create_document(
                args.template_id, _parse_fields(args.field), args.title
            )
        except argparse.ArgumentTypeError as exc:
            print(exc, file=sys.stderr)
            return 1
        except TemplateNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 1
        except FormValidationError as exc:
            for message in exc.errors.values():
                print(message, file=sys.stderr)
            return 1
        print(title)
        print()
        print(content)
    elif args.command == "validate-register":
        try:
            asyncio.run(assistant.validate_register(Path(args.input), Path(args.output)))
        except KeyboardInterrupt:
            logger.warning("Interrupted by user")
            return 1
        except (FileNotFoundError, ValueError) as exc:
            logger.error("Register validation failed: %s", exc)
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
