from pathlib import Path

from docintake.chat.exceptions import ChatError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the chat prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled chat_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        ChatError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "chat_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ChatError(f"Failed to load prompt template: {exc}") from exc
