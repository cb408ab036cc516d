"""Single-line source excerpts with a caret marker.

Positions are str indices (code points) into the source.
"""

from icuparser.constants import MAX_SNIPPET_WIDTH, SNIPPET_CONTEXT

__all__ = ["line_and_column", "line_bounds", "render_snippet"]

_ELLIPSIS = "..."


def line_bounds(source: str, position: int) -> tuple[int, int]:
    """Return [start, end) of the line containing position (newline excluded)."""
    position = max(0, min(position, len(source)))
    start = source.rfind("\n", 0, position) + 1
    end = source.find("\n", position)
    if end == -1:
        end = len(source)
    if end > start and source[end - 1] == "\r":
        end -= 1
    return start, end


def line_and_column(source: str, position: int) -> tuple[int, int]:
    """Convert position to 1-based (line, column).

    Example:
        >>> line_and_column("a\\nbc", 3)
        (2, 2)
    """
    position = max(0, min(position, len(source)))
    line = source.count("\n", 0, position) + 1
    column = position - (source.rfind("\n", 0, position) + 1) + 1
    return line, column


def render_snippet(
    source: str,
    position: int,
    *,
    max_width: int = MAX_SNIPPET_WIDTH,
) -> str:
    """Render the line containing position with a caret under it.

    Lines wider than max_width are windowed around the caret and marked
    with "..." on the cut side(s).

    Example:
        >>> print(render_snippet("Hello {name", 11))
        Line 1: Hello {name
                           ^
    """
    position = max(0, min(position, len(source)))
    start, end = line_bounds(source, position)
    line = source[start:end]
    caret = min(position - start, len(line))
    line_number, _ = line_and_column(source, position)

    excerpt = line
    if len(line) > max_width:
        window_start = max(0, caret - SNIPPET_CONTEXT)
        window_start = min(window_start, len(line) - max_width)
        window_end = window_start + max_width
        excerpt = line[window_start:window_end]
        caret -= window_start
        if window_start > 0:
            excerpt = _ELLIPSIS + excerpt
            caret += len(_ELLIPSIS)
        if window_end < len(line):
            excerpt += _ELLIPSIS

    label = f"Line {line_number}: "
    return f"{label}{excerpt}\n{' ' * (len(label) + caret)}^"
