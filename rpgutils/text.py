"""Text helpers for wrapping item descriptions."""


def ltrim(text: str) -> str:
    """Strip leading space characters (only ``' '``)."""
    return text.lstrip(" ")


def normalize_text(text: str, line_length: int) -> str:
    """Wrap ``text`` into lines of at most ``line_length`` characters.

    Lines break at the last space that fits; a word longer than a line is
    cut. Leading spaces of each line are dropped.
    """
    if line_length <= 0:
        raise ValueError("line_length must be positive")
    lines = []
    i = 0
    while i < len(text):
        if len(text) - i <= line_length:
            lines.append(ltrim(text[i:i + line_length]))
            break
        last = text.rfind(" ", i + 1, i + line_length + 1)
        if last == -1:
            lines.append(ltrim(text[i:i + line_length]))
            i += line_length
        else:
            lines.append(ltrim(text[i:last]))
            i = last
    return "\n".join(lines)