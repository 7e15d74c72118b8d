"""Markdown code-fence removal for model output.

Models wrap answers in ```json / ```jsx fences even when told not to. This is
a plain text substitution: every ```<lang> marker for the given language tags
is removed, then every bare ``` marker, then the result is trimmed. Fences in
the middle of the text are removed too; nothing is parsed.
"""

import re
from typing import Iterable

_BARE_FENCE = "```"


def unwrap_code_block(text: str, languages: Iterable[str] = ()) -> str:
    """Strip fence markers of the known forms and trim surrounding whitespace.

    Args:
        text:      Raw completion text.
        languages: Language tags whose tagged fences (```json, ```jsx, ...)
                   are removed before bare fences.

    Returns:
        The unwrapped text. Text without fences is only trimmed.
    """
    if not text:
        return ""
    cleaned = text
    for lang in languages:
        cleaned = re.sub(re.escape(_BARE_FENCE + lang), "", cleaned)
    cleaned = cleaned.replace(_BARE_FENCE, "")
    return cleaned.strip()


def unwrap_json(text: str) -> str:
    return unwrap_code_block(text, languages=("json",))


def unwrap_jsx(text: str) -> str:
    return unwrap_code_block(text, languages=("jsx",))
