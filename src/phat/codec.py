#! /usr/bin/env python3
#
# phat/codec.py

"""Encode/decode values for use inside attribute values.

Encoded values are safe inside single quotes: `name='<encoded>'`.

Strings are entity-escaped. Lists and mappings for token-list
attributes (see `phat.delimiters`) are joined with the attribute's
delimiter. Everything else is written as JSON.

Decoding is deliberately lossy: any value that parses as JSON is
returned as the parsed value, so `"5"` decodes to `5`.
"""

from collections.abc import Mapping
from html import unescape
import json
import logging
import re

from .deferred import is_deferred
from .delimiters import get_delimiter
from .tokens import join_deep, split_tokens

logger = logging.getLogger(__name__)

# `&` not already starting a character reference
AMP_RE = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")

JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def is_composite(value):
    return isinstance(value, (list, tuple, set, frozenset, Mapping))


def esc(value, quote=True):
    """Escape a string for use in HTML or HTML attributes.

    Existing character references are not escaped again.

    Args:
        value (str): Text.
        quote (bool): Also escape `"` and `'`.

    Returns:
        Escaped text.
    """
    value = str(value)
    if not value:
        return value
    value = AMP_RE.sub("&amp;", value).replace("<", "&lt;").replace(">", "&gt;")
    if quote:
        value = value.replace('"', "&quot;").replace("'", "&apos;")
    return value


def _json_default(o):
    if isinstance(o, (set, frozenset)):
        return list(o)
    if is_deferred(o):
        return o()
    return str(o)


def _to_json(value):
    s = json.dumps(value, separators=(",", ":"), default=_json_default)
    for ch, replacement in JSON_HTML_ESCAPES.items():
        s = s.replace(ch, replacement)
    return s.replace("'", "&apos;")


def encode_attribute_value(value, name=None, retain=False):
    """Encode a value for use inside a (single-quoted) attribute value.

    Args:
        value: `str`, `bool`, `None`, number, list, mapping or deferred
            value.
        name (str|None): Attribute name. Used to join lists for
            token-list attributes like `class`.
        retain (bool): Return `None`/`False`/`True` as is (for callers
            to handle).

    Returns:
        Encoded string, or the `None`/`bool` value if `retain`.

    Raises:
        ValueError: Lists or mappings that contain themselves.
    """
    if is_deferred(value):
        return encode_attribute_value(value(), name, retain)

    if isinstance(value, str):
        return esc(value)

    if value is None or value is False or value is True:
        if retain:
            return value
        if value is None:
            return "null"
        if value is False:
            return ""
        return _to_json(value)

    if is_composite(value):
        if not value:
            return ""
        delimiter = get_delimiter(name) if name else None
        if delimiter is not None:
            return encode_attribute_value(join_deep(value, delimiter))
        if isinstance(value, (set, frozenset)):
            value = list(value)

    return _to_json(value)


def _reject_constant(s):
    raise ValueError(f"not standard JSON ({s})")


def decode_attribute_value(value, name=None):
    """Decode an attribute value.

    Args:
        value (str): Raw attribute value (as parsed).
        name (str|None): Attribute name. Token-list attributes (like
            `class`) decode to a list of tokens.

    Returns:
        List of tokens, JSON value, or entity-decoded string.
    """
    if not value or not isinstance(value, str):
        return value

    delimiter = get_delimiter(name) if name else None
    if delimiter is not None:
        return split_tokens(unescape(value), delimiter)

    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug(f"not json ({value=})")
    return unescape(value)


# short names
encode = encode_attribute_value
decode = decode_attribute_value
