from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


class PromptLoadError(Exception):
    """Raised when a bundled or custom prompt file cannot be read."""


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load a prompt text file.

    Args:
        name: File name inside the bundled ``prompts`` directory.
        path: Explicit file to read instead of the bundled one.

    Returns:
        The raw prompt text with surrounding whitespace removed.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt {path}: {exc}") from exc
