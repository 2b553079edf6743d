"""Bundled prompt files for the extraction request.

Both files live in the package's prompts/ directory; callers may point at
their own copies instead.
"""

from pathlib import Path

from app.extraction.exceptions import ExtractionError

PROMPTS_DIR = Path(__file__).parent / "prompts"
PROMPT_FILENAME = "extraction_prompt.txt"
SCHEMA_FILENAME = "extraction_schema.json"


def load_prompt_template(path: Path | None = None) -> str:
    """Return the instruction template with its {html_content} placeholder."""
    return _read_bundled(path or PROMPTS_DIR / PROMPT_FILENAME, "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Return the output schema text sent alongside the prompt."""
    return _read_bundled(path or PROMPTS_DIR / SCHEMA_FILENAME, "JSON schema")


def _read_bundled(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {label} from {path.name}: {exc}") from exc
