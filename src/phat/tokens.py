#! /usr/bin/env python3
#
# phat/tokens.py

"""Join and split token lists (e.g., SSV and CSV values).
"""

from collections.abc import Iterable, Mapping
import re

from .deferred import is_deferred

WHITESPACE_RE = re.compile(r"\s+")


def _is_scalar(o):
    return isinstance(o, (str, int, float))


def join_deep(tokens, glue=" "):
    """Deep join.

    Nested lists (and mapping values) are flattened depth-first.
    Deferred tokens are resolved.

    Args:
        tokens: Scalar or (nested) list of tokens.
        glue (str): Separator. Defaults to a space.

    Returns:
        Joined string. Scalars are returned trimmed.
    """
    if is_deferred(tokens):
        return join_deep(tokens(), glue)
    if isinstance(tokens, bool):
        return "true" if tokens else ""
    if _is_scalar(tokens):
        return str(tokens).strip()
    if not tokens:
        return ""
    if isinstance(tokens, Mapping):
        tokens = tokens.values()
    elif not isinstance(tokens, Iterable):
        return str(tokens).strip()
    return glue.join([join_deep(token, glue) for token in tokens])


def split_tokens(tokens, glue=" "):
    """Split into a list of tokens.

    If `glue` is a list, `tokens` is split at any of its items (all are
    normalized to the first). A whitespace glue splits at runs of
    whitespace.

    Args:
        tokens: String, scalar, or (nested) list of tokens.
        glue (str|list): One or more delimiters. Defaults to a space.

    Returns:
        List of tokens.
    """
    if isinstance(glue, (list, tuple)) and not glue:
        glue = " "

    if isinstance(tokens, str):
        tokens = tokens.strip()
    elif tokens is None:
        return []
    elif _is_scalar(tokens):
        return [tokens]
    else:
        tokens = join_deep(tokens, glue[0] if isinstance(glue, (list, tuple)) else glue)

    if tokens == "":
        return []

    if isinstance(glue, (list, tuple)):
        for other in glue[1:]:
            tokens = tokens.replace(other, glue[0])
        glue = glue[0]

    if not glue:
        return [tokens]
    if glue.isspace():
        return WHITESPACE_RE.split(tokens.strip())
    return tokens.split(glue)


# short names
implode = join_deep
explode = split_tokens
