"""Bracket-aware text scanning for Sanity schema source.

The schema parser does not build a grammar. It runs nested pattern passes
over text windows, and this module supplies the pieces those passes need:
a tokenizer that skips comments and string and regex literals, a bracket
matcher, and lazy enumerations of blocks inside a window. Blocks and
sections only start where the tokenizer sees code.

Every enumeration is a generator that keeps its cursor in local state, so
calling it again restarts from the beginning of the window. Malformed
input is never an error: an unbalanced bracket extends its block to the
end of the window.
"""

import re
from typing import Iterator, Optional, Pattern, Tuple

OPENERS = "([{"
CLOSERS = ")]}"
QUOTES = "'\"`"
# A slash after one of these (or at the start) opens a regex literal, not a division.
REGEX_PRECEDERS = "(,=:[!&|?{};"


def tokens(text: str, start: int = 0) -> Iterator[Tuple[int, str]]:
    """Yield ``(position, token)`` pairs for the code in ``text``.

    A token is a single code character, a complete string literal (quotes
    included) or a complete regex literal (slashes and flags included).
    Comments are dropped.
    """
    i = start
    length = len(text)
    previous = ""  # last non-whitespace code character

    while i < length:
        ch = text[i]

        if ch in QUOTES:
            j = i + 1
            while j < length:
                if text[j] == "\\":
                    j += 2
                    continue
                if text[j] == ch:
                    j += 1
                    break
                j += 1
            yield i, text[i:j]
            previous = ch
            i = j
            continue

        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
            continue

        if text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
            continue

        if ch == "/" and (not previous or previous in REGEX_PRECEDERS):
            end = _regex_literal_end(text, i)
            if end is not None:
                yield i, text[i:end]
                previous = "/"
                i = end
                continue

        yield i, ch
        if not ch.isspace():
            previous = ch
        i += 1


def _regex_literal_end(text: str, start: int) -> Optional[int]:
    """Return the index just past the regex literal at ``start``, flags included.

    Returns None when no closing slash is found on the same line.
    """
    in_class = False
    j = start + 1
    length = len(text)
    while j < length:
        ch = text[j]
        if ch == "\n":
            return None
        if ch == "\\":
            j += 2
            continue
        if ch == "[":
            in_class = True
        elif ch == "]":
            in_class = False
        elif ch == "/" and not in_class:
            j += 1
            while j < length and text[j].isalpha():
                j += 1
            return j
        j += 1
    return None


def search_code(text: str, pattern: Pattern[str], start: int = 0) -> Optional[re.Match]:
    """Return the first ``pattern`` match that begins in code.

    Matches starting inside a comment, a string or a regex literal are
    skipped.
    """
    for position, token in tokens(text, start):
        if len(token) == 1:
            match = pattern.match(text, position)
            if match is not None:
                return match
    return None


def find_closing(text: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at ``open_index``.

    Bracket kinds are not checked against each other. Returns ``len(text)``
    when the bracket is never closed.
    """
    depth = 0
    for position, token in tokens(text, open_index):
        if token in OPENERS:
            depth += 1
        elif token in CLOSERS:
            depth -= 1
            if depth == 0:
                return position
    return len(text)


def find_section(text: str, pattern: Pattern[str]) -> Optional[str]:
    """Return the contents of the bracket that ends the first ``pattern`` match.

    ``pattern`` must end with the opening bracket, e.g. ``fields:\\s*\\[``.
    """
    match = search_code(text, pattern)
    if match is None:
        return None
    open_index = match.end() - 1
    return text[open_index + 1:find_closing(text, open_index)]


def iter_blocks(text: str, pattern: Pattern[str]) -> Iterator[str]:
    """Yield each block that starts with a ``pattern`` match, in document order.

    ``pattern`` must end with an opening bracket. The block runs from the
    start of the match through the bracket's partner. Blocks nested inside
    a yielded block are not yielded on their own, and neither are matches
    inside comments or string literals.
    """
    position = 0
    while True:
        match = search_code(text, pattern, position)
        if match is None:
            return
        close = find_closing(text, match.end() - 1)
        yield text[match.start():close + 1]
        position = close + 1


def iter_objects(text: str) -> Iterator[str]:
    """Yield each ``{...}`` item that sits directly in a list body.

    Parentheses do not count as nesting, so ``defineField({...})`` items
    are yielded as their object literal.
    """
    depth = 0
    skip_until = -1
    for position, token in tokens(text):
        if position <= skip_until:
            continue
        if token == "{" and depth == 0:
            close = find_closing(text, position)
            yield text[position:close + 1]
            skip_until = close
        elif token in "[{":
            depth += 1
        elif token in "]}":
            depth = max(depth - 1, 0)


def own_level(block: str) -> str:
    """Return the text of ``block`` that sits directly inside its first brace.

    Nested brackets and their contents are removed, which leaves only the
    keys that belong to the block itself.
    """
    start = block.find("{")
    if start == -1:
        return block

    parts = []
    depth = 0
    for _, token in tokens(block, start):
        if token in OPENERS:
            depth += 1
        elif token in CLOSERS:
            depth -= 1
            if depth == 0:
                break
        elif depth == 1:
            parts.append(token)
    return "".join(parts)


def key_pattern(key: str, value: str = r"[^'\"]+") -> Pattern[str]:
    """Build a pattern for ``key: 'value'`` with either quote style."""
    return re.compile(rf"\b{key}:\s*['\"]({value})['\"]")
