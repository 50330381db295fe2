"""Token interpolation for translated strings.

Tokens are brace-delimited placeholders such as ``{count}``. Nested braces
are not supported: a token is the shortest run from a "{" to the next "}".
"""

import math
import re
from typing import Any, List, Mapping, Optional

TOKEN_PATTERN = re.compile(r"\{[^}]+?\}")


def find_tokens(value: str) -> List[str]:
    """Return every token in value, in order of appearance."""
    return TOKEN_PATTERN.findall(value)


def is_keyed(args: Any) -> bool:
    """Return True for args looked up per token name (mappings, lists, tuples)."""
    return isinstance(args, (Mapping, list, tuple))


def format_value(value: Any) -> str:
    """Render a substitution value as text.

    Booleans render as "true"/"false" and integral floats without a
    fractional part, so 1.0 renders as "1". NaN and infinities render as
    "NaN", "Infinity" and "-Infinity".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _lookup(args: Any, name: str) -> Optional[Any]:
    if isinstance(args, Mapping):
        return args.get(name)
    # Sequences are keyed by canonical decimal indices ("0", "1", ...).
    if name.isdecimal() and str(int(name)) == name and int(name) < len(args):
        return args[int(name)]
    return None


def interpolate(value: str, args: Any) -> str:
    """Substitute tokens in value with args.

    With keyed args (a mapping, list or tuple), each token is replaced by the
    entry named by its inner text; lists and tuples are indexed by tokens
    such as ``{0}``. Missing entries and None values become "". Any other
    value replaces every token with its text form.

    Token text is matched literally, so "{", "}" and "|" inside a token are
    never treated as pattern syntax.

    Args:
        value: Translated string containing zero or more tokens.
        args: Keyed args, or a single primitive.

    Returns:
        The substituted string, or value unchanged when it has no tokens.
    """
    tokens = find_tokens(value)
    if not tokens:
        return value

    if is_keyed(args):
        for token in tokens:
            replacement = _lookup(args, token[1:-1])
            value = value.replace(
                token, "" if replacement is None else format_value(replacement)
            )
        return value

    replacement = format_value(args)
    return TOKEN_PATTERN.sub(lambda _match: replacement, value)
