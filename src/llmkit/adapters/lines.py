"""Line splitting shared by the line-oriented readers."""


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``, dropping a trailing ``\\r`` from each line.

    A trailing newline does not produce an extra empty line, so
    ``"a\\nb\\n"`` has two lines. Unlike ``str.splitlines`` no other
    separators (form feed, U+2028, ...) are treated as line breaks.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


__all__ = ["split_lines"]
