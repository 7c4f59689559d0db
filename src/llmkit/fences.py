"""Strip Markdown code fences from LLM-style output."""

import re

_FENCED_BLOCK = re.compile(r"```(?:[a-zA-Z0-9_+\-]+)?\s*(.*?)\s*```", re.IGNORECASE | re.DOTALL)
_INLINE_SPAN = re.compile(r"`([^`]*)`")


def strip_markdown_fences(text: str | bytes) -> str:
    """Return the payload hidden inside Markdown code fences.

    Only the first fenced block is extracted (trimmed). Without a fenced
    block, inline backtick spans lose their backticks and the rest of the
    text is kept. Bytes are decoded as UTF-8, replacing invalid sequences.

    Example:
        >>> strip_markdown_fences("Here:\\n```json\\n{\\"a\\": 1}\\n```")
        '{"a": 1}'
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")

    match = _FENCED_BLOCK.search(text)
    if match:
        return match.group(1)
    return _INLINE_SPAN.sub(r"\1", text)


__all__ = ["strip_markdown_fences"]
