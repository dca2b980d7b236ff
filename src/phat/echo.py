#! /usr/bin/env python3
#
# phat/echo.py

"""Echoing variants of the string-producing operations.

Each wrapper writes the result of its operation to `sys.stdout`
(without a newline) instead of returning it.
"""

import functools
import sys

from . import attributes, codec, names, tokens


def echoer(fn):
    """Return a function that writes the result of `fn` to stdout."""

    @functools.wraps(fn)
    def _echo(*args, **kwargs):
        result = fn(*args, **kwargs)
        if result is not None and result is not False:
            sys.stdout.write(str(result))

    return _echo


build_attribute_string = echoer(attributes.build_attribute_string)
encode_attribute_value = echoer(codec.encode_attribute_value)
join_deep = echoer(tokens.join_deep)
sanitize_attr_name = echoer(names.sanitize_attr_name)
sanitize_tag_name = echoer(names.sanitize_tag_name)

# short names
attrs_e = build_attribute_string
attname_e = sanitize_attr_name
encode_e = encode_attribute_value
implode_e = join_deep
tagname_e = sanitize_tag_name
