#! /usr/bin/env python3
#
# phat/attributes.py

"""Build and parse attribute strings.

`build_attribute_string()` produces `name='value'` pairs, always single
quoted, and bare names for boolean attributes:

    >>> build_attribute_string({"id": "x", "class": ["a", "b"], "hidden": True})
    "id='x' class='a b' hidden"

`parse_attribute_string()` goes the other way, without decoding the
values (see `phat.codec.decode_attribute_value()`):

    >>> parse_attribute_string('<a href="x" target=_blank>')
    {'href': 'x', 'target': '_blank'}
"""

from collections.abc import Mapping
import logging
import re

from .codec import encode_attribute_value
from .deferred import resolve
from .names import sanitize_attr_name

logger = logging.getLogger(__name__)

LEADING_TAG_RE = re.compile(r"^<+\S*")
PRESTRINGIFIED_RE = re.compile(r"[=\s]")

# parser modes
NEUTRAL = 0
IN_NAME = 1
IN_VALUE = 2

# stop condition for unquoted values
BARE = " "


def parse_attribute_string(raw):
    """Parse a string of attributes into a dict.

    If the string starts with a tag, then the attributes of that tag
    are parsed. Parsing stops at the first `>` outside of a value.
    Boolean attributes get an empty string value. Values are not
    decoded.

    Args:
        raw (str): Attributes, e.g., `'src="example.jpg" alt=example'`
            or `'<img src="example.jpg" alt=example>'`.

    Returns:
        Dict of name to raw value, in document order. A repeated name
        keeps its first position and its last value.
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if raw is None:
        return {}

    raw = str(raw).strip()
    m = LEADING_TAG_RE.match(raw)
    if m:
        logger.debug(f"stripped tag ({m.group(0)=})")
        raw = raw[m.end():]

    attrs = {}
    name = ""
    value = ""
    mode = NEUTRAL
    stop = None
    prev = ""

    for ch in raw:
        if mode == IN_NAME:
            if ch == "=":
                mode = IN_VALUE
                stop = None
            elif ch == ">":
                attrs[name] = value
                name = ""
                break
            elif not ch.isspace():
                if prev.isspace():
                    # previous name was a boolean attribute
                    attrs[name] = ""
                    name = ch
                else:
                    name += ch
        elif mode == IN_VALUE:
            if stop is None:
                if not ch.isspace():
                    if ch in "\"'":
                        value = ""
                        stop = ch
                    else:
                        value = ch
                        stop = BARE
            elif ch.isspace() if stop == BARE else ch == stop:
                attrs[name] = value
                mode = NEUTRAL
                name = value = ""
            else:
                value += ch
        else:
            if ch == ">":
                break
            if not ch.isspace():
                name = ch
                mode = IN_NAME
        prev = ch

    # a bare value ending the input may end with the tag's closing ">"
    if mode == IN_VALUE and stop == BARE and value.endswith(">"):
        value = value[:-1]

    # incl the final pair if unterminated
    if name:
        attrs[name] = value
    return attrs


def build_attribute_string(name, value="", strict=False):
    """Produce an attribute string.

    `None` names/values and `False` values produce nothing. `True`
    and "" values produce boolean (bare) attributes. Other values are
    encoded via `encode_attribute_value()`.

    Args:
        name: Attribute name; a dict of name/value pairs; a list of
            names (or dicts); or an attribute string to be normalized
            like `title="x"` or `async defer`. Deferred names are
            resolved.
        value: Value for `name` when `name` is an attribute name.
        strict (bool): Drop names not starting with a letter or
            underscore (see `sanitize_attr_name()`).

    Returns:
        Attribute string. Empty if there is nothing to render.
    """
    # list items (by index)
    if isinstance(name, int) and not isinstance(name, bool) and name >= 0:
        name, value = value, ""

    name = resolve(name)
    value = resolve(value)

    # dev.w3.org/html5/spec/common-microsyntaxes.html#boolean-attributes
    if value is False or value is None or name is None or isinstance(name, bool):
        return ""

    if isinstance(name, Mapping) or isinstance(name, (list, tuple, set, frozenset)):
        items = name.items() if isinstance(name, Mapping) else enumerate(name)
        pairs = [build_attribute_string(k, v, strict) for k, v in items]
        return " ".join([pair for pair in pairs if pair])

    name = str(name).strip()
    if name and not name.isalpha():
        if PRESTRINGIFIED_RE.search(name):
            # already stringified like `title="x"` or `async defer`
            parsed = parse_attribute_string(name)
            pairs = [build_attribute_string(sanitize_attr_name(k, strict), v, strict) for k, v in parsed.items()]
            return " ".join([pair for pair in pairs if pair])
        sanitized = sanitize_attr_name(name, strict)
        if sanitized != name:
            logger.debug(f"sanitized attribute name ({name=} {sanitized=})")
        name = sanitized

    # <p contenteditable> is <p contenteditable="">
    if value == "" or value is True or name == "":
        return name

    encoded = encode_attribute_value(value, name)
    if encoded == "":
        return name
    return f"{name}='{encoded}'"


# short names
attrs = build_attribute_string
parse_attrs = parse_attribute_string
