#! /usr/bin/env python3
#
# phat/names.py

"""Tag and attribute name sanitizers.
"""

import re

# w3.org/TR/html-markup/syntax.html#tag-name
# w3.org/TR/REC-xml/#NT-Name
TAGNAME_RE = re.compile(r"\s*<*([\w:.-]*)", re.ASCII)

# w3.org/TR/html-markup/syntax.html#syntax-attributes
ATTNAME_TAIL_RE = re.compile(r"[=>].*", re.DOTALL)
ATTNAME_PUNCTUATION = "_:.-"
ATTNAME_START_RE = re.compile(r"[^\W\d]")


def _is_attname_char(ch):
    # letters and decimal digits only, not other numerics like "½"
    return ch.isalpha() or ch.isdecimal() or ch in ATTNAME_PUNCTUATION


def sanitize_tag_name(name):
    """Sanitize an HTML or XML tag name. Or read the tag name of a tag.

    Leading whitespace and `<` are skipped, then the longest run of
    alphanumerics, underscore, colon, period and hyphen is kept.

    Args:
        name (str): Name or tag, e.g., `"div"` or `"<img src=x>"`.

    Returns:
        Tag name, possibly empty. Empty for non-`str` input.
    """
    if not isinstance(name, str):
        return ""
    return TAGNAME_RE.match(name).group(1)


def sanitize_attr_name(name, strict=False):
    """Sanitize an HTML or XML attribute name.

    Everything from the first `=` or `>` is dropped, then any character
    other than a letter, digit, underscore, colon, period or hyphen.

    Args:
        name (str): Attribute name.
        strict (bool): Require the name to start with a letter or
            underscore; yield "" otherwise.

    Returns:
        Attribute name, possibly empty. Empty for non-`str` input.
    """
    if not isinstance(name, str):
        return ""
    name = "".join([ch for ch in ATTNAME_TAIL_RE.sub("", name) if _is_attname_char(ch)])
    if strict and not ATTNAME_START_RE.match(name):
        return ""
    return name


# short names
tagname = sanitize_tag_name
attname = sanitize_attr_name
