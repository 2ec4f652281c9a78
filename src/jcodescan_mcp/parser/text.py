"""Length-preserving text helpers shared by the extractors."""

from typing import Optional

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


def _blank(segment: str) -> str:
    """Replace everything except newlines with spaces."""
    return "".join("\n" if ch == "\n" else " " for ch in segment)


def _literal_end(text: str, start: int) -> int:
    """Index just past the string or char literal opening at `start`."""
    if text.startswith('"""', start):
        end = text.find('"""', start + 3)
        return len(text) if end == -1 else end + 3

    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote or ch == "\n":
            return i + 1
        i += 1
    return len(text)


def mask_comments(text: str) -> str:
    """Blank out // and /* */ comments, keeping offsets and line breaks.

    String and character literals are copied through untouched, so comment
    markers inside them are not treated as comments.
    """
    out = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch in ('"', "'"):
            end = _literal_end(text, i)
            out.append(text[i:end])
            i = end
        elif text.startswith("//", i):
            end = text.find("\n", i)
            end = n if end == -1 else end
            out.append(_blank(text[i:end]))
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append(_blank(text[i:end]))
            i = end
        else:
            out.append(ch)
            i += 1

    return "".join(out)


def mask_literals(text: str) -> str:
    """Blank the interiors of string and char literals, keeping the quotes."""
    out = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch in ('"', "'"):
            end = _literal_end(text, i)
            out.append(ch)
            out.append(_blank(text[i + 1:end - 1]))
            if end - i > 1:
                out.append(text[end - 1])
            i = end
        else:
            out.append(ch)
            i += 1

    return "".join(out)


def declaration_start(structural: str, end: int) -> int:
    """Start of the declaration that ends at `end`.

    Walks back to the nearest `;`, `{` or `}` outside parentheses. Expects
    text with comments and literal interiors already blanked.
    """
    depth = 0
    i = end - 1
    while i >= 0:
        ch = structural[i]
        if ch == ")":
            depth += 1
        elif ch == "(":
            if depth > 0:
                depth -= 1
        elif depth == 0 and ch in ";{}":
            return i + 1
        i -= 1
    return 0


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on `sep` where it is not nested in (), [], {} or a literal.

    Example: 'A("x, y"), B(1, 2), C' -> ['A("x, y")', ' B(1, 2)', ' C']
    """
    parts = []
    stack = []
    start = 0
    i = 0

    while i < len(text):
        ch = text[i]
        if ch in ('"', "'"):
            i = _literal_end(text, i)
            continue
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS and stack and stack[-1] == _CLOSERS[ch]:
            stack.pop()
        elif ch == sep and not stack:
            parts.append(text[start:i])
            start = i + 1
        i += 1

    parts.append(text[start:])
    return parts


def first_string_literal(text: str) -> Optional[str]:
    """Return the contents of the first double-quoted literal in `text`."""
    start = text.find('"')
    if start == -1:
        return None
    end = _literal_end(text, start)
    if end - start < 2 or text[end - 1] != '"':
        return None
    return text[start + 1:end - 1]
