"""
Bag literal parsing.

Upstream jobs group geometries per tile as a bag literal:

    {({"type":"Point","coordinates":[1,2]}),({"type":"Point",...})}

i.e. braces around comma-separated tuples, each tuple wrapping one
serialized fragment. Fragments are JSON, so tuple boundaries are found by
tracking bracket depth and string state instead of splitting on "),(".
"""

from typing import List

from common.errors import MalformedBagSyntax

OPENERS = {'(': ')', '[': ']', '{': '}'}
CLOSERS = {')', ']', '}'}


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _tuple_end(text: str, start: int, offset: int) -> int:
    """
    Find the ')' closing the tuple opened at text[start].

    Args:
        text: Bag body
        start: Index of the opening '('
        offset: Position of text[0] in the original bag (for messages)

    Returns:
        Index of the matching ')'
    """
    stack = []
    in_string = False
    escaped = False

    for pos in range(start, len(text)):
        char = text[pos]

        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char in OPENERS:
            stack.append(OPENERS[char])
        elif char in CLOSERS:
            if not stack or stack[-1] != char:
                raise MalformedBagSyntax(
                    f"Unbalanced {char!r} at position {pos + offset}"
                )
            stack.pop()
            if not stack:
                return pos

    if in_string:
        raise MalformedBagSyntax(f"Unterminated string in tuple at position {start + offset}")
    raise MalformedBagSyntax(f"Unclosed tuple at position {start + offset}")


def parse_bag(text: str) -> List[str]:
    """
    Split a bag literal into its fragments.

    Empty tuples are dropped, so '{}' and '{()}' both give [].

    Args:
        text: Bag literal (surrounding whitespace allowed)

    Returns:
        Trimmed fragment strings in bag order

    Raises:
        MalformedBagSyntax: If the text is not a well-formed bag
    """
    text = text.strip()
    if len(text) < 2 or text[0] != '{' or text[-1] != '}':
        preview = text if len(text) <= 40 else text[:37] + "..."
        raise MalformedBagSyntax(f"Bag must be wrapped in '{{' and '}}': {preview!r}")

    body = text[1:-1]
    fragments: List[str] = []

    pos = _skip_ws(body, 0)
    if pos == len(body):
        return fragments

    while True:
        if body[pos] != '(':
            raise MalformedBagSyntax(f"Expected '(' at position {pos + 1}, got {body[pos]!r}")

        end = _tuple_end(body, pos, offset=1)
        fragment = body[pos + 1:end].strip()
        if fragment:
            fragments.append(fragment)

        pos = _skip_ws(body, end + 1)
        if pos == len(body):
            return fragments
        if body[pos] != ',':
            raise MalformedBagSyntax(f"Expected ',' at position {pos + 1}, got {body[pos]!r}")

        pos = _skip_ws(body, pos + 1)
        if pos == len(body):
            raise MalformedBagSyntax("Trailing ',' at end of bag")
