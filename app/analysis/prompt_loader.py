from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(path: Path | None = None) -> str:
    """Load the analysis instruction prompt from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        ValueError: if the file cannot be read or is empty.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        prompt = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ValueError(f"Failed to load analysis prompt: {exc}") from exc
    if not prompt:
        raise ValueError(f"Analysis prompt is empty: {path}")
    return prompt
