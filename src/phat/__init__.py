#! /usr/bin/env python3
#
# phat/__init__.py

"""HTML attribute strings: build, parse, encode, decode.

Modules:

* `phat.attributes` - build and parse attribute strings
* `phat.codec` - encode/decode attribute values
* `phat.config` - YAML configuration, logging setup
* `phat.deferred` - values produced on demand
* `phat.delimiters` - token delimiters for multi-valued attributes
* `phat.echo` - echoing variants
* `phat.names` - tag and attribute name sanitizers
* `phat.tokens` - join/split token lists
"""

__VERSION__ = "2.4.0"

from .attributes import attrs, build_attribute_string, parse_attribute_string, parse_attrs
from .codec import (
    decode,
    decode_attribute_value,
    encode,
    encode_attribute_value,
    esc,
)
from .deferred import Deferred
from .delimiters import DelimiterTable, get_delimiter, register_delimiter
from .names import attname, sanitize_attr_name, sanitize_tag_name, tagname
from .tokens import explode, implode, join_deep, split_tokens

__all__ = [
    "Deferred",
    "DelimiterTable",
    "attname",
    "attrs",
    "build_attribute_string",
    "decode",
    "decode_attribute_value",
    "encode",
    "encode_attribute_value",
    "esc",
    "explode",
    "get_delimiter",
    "implode",
    "join_deep",
    "parse_attribute_string",
    "parse_attrs",
    "register_delimiter",
    "sanitize_attr_name",
    "sanitize_tag_name",
    "split_tokens",
    "tagname",
]
