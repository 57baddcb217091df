from pathlib import Path

from comment_extractor.extraction.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_extraction_prompt(path: Path | None = None) -> str:
    """Load the comment extraction instruction from a file.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The instruction text, stripped of surrounding whitespace.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load extraction prompt: {exc}") from exc
