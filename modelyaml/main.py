"""CLI entry point for the model.yaml builder.

Starts from the default form, applies ``--set`` edits in order, and prints the
generated model.yaml and/or manifest.json to stdout.
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from modelyaml.config import LOG_LEVEL
from modelyaml.editor import MANIFEST_JSON_FILENAME, MODEL_YAML_FILENAME, ModelEditor
from modelyaml.errors import UnknownFormField
from modelyaml.form_state import field_type

logger = logging.getLogger(__name__)

TRUE_WORDS = {"true", "yes", "on", "1"}
FALSE_WORDS = {"false", "no", "off", "0"}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_bool(text: str) -> bool:
    """Interpret a command-line word as a boolean toggle."""
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"Expected a boolean (true/false), got {text!r}")


def parse_assignment(text: str) -> tuple[str, str]:
    """Split ``KEY=VALUE``; the value may itself contain ``=``."""
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {text!r}")
    return key.strip(), value


def apply_edits(editor: ModelEditor, edits: list[tuple[str, str]]) -> None:
    """Apply ``--set`` edits in order; later edits to the same key win.

    Raises ``UnknownFormField`` or ``ValueError`` on a bad key or boolean.
    """
    for key, raw in edits:
        value = parse_bool(raw) if field_type(key) is bool else raw
        editor.update(key, value)


def render(editor: ModelEditor, output: str) -> str:
    """Return the text to print for the chosen ``--output``."""
    if output == "yaml":
        return editor.model_yaml
    if output == "manifest":
        return editor.manifest_json
    sections = [f"# --- {name} ---\n{text}" for name, text in editor.documents().items()]
    return "\n\n".join(sections)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelyaml-builder",
        description=(
            "model.yaml HF Builder: swap LM Studio base models for any Hugging Face repo"
        ),
    )
    parser.add_argument(
        "--set",
        dest="edits",
        metavar="KEY=VALUE",
        type=parse_assignment,
        action="append",
        default=[],
        help="Set a form field, e.g. --set hfRepo=Foo-GGUF (repeatable)",
    )
    parser.add_argument(
        "--output",
        choices=["yaml", "manifest", "both"],
        default="both",
        help=f"Which document to print: {MODEL_YAML_FILENAME}, {MANIFEST_JSON_FILENAME} "
        "or both (default: both)",
    )
    parser.add_argument(
        "--show-state",
        action="store_true",
        help="Print the form fields as JSON instead of the documents",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "WARNING",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    editor = ModelEditor()
    try:
        apply_edits(editor, args.edits)
    except (UnknownFormField, ValueError, ValidationError) as e:
        parser.error(str(e))

    logger.info("Applied %d edit(s)", len(args.edits))

    if args.show_state:
        sys.stdout.write(json.dumps(editor.state.to_form_dict(), indent=2) + "\n")
        return

    sys.stdout.write(render(editor, args.output) + "\n")


if __name__ == "__main__":
    main()
