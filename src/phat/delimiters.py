#! /usr/bin/env python3
#
# phat/delimiters.py

"""Token delimiters for multi-valued attributes.

Some attributes hold a list of tokens rather than a single value,
e.g., `class` (space-separated) or `accept` (comma-separated). The
delimiter table maps attribute names to the delimiter used to join
and split such lists.

The table is process-wide, populated with the built-in entries on
first use, and append-only: the first registration for a name wins.
"""

import logging
import threading

logger = logging.getLogger(__name__)

# dev.w3.org/html5/spec-author-view/index.html#attributes-1
# whatwg.org/specs/web-apps/current-work/multipage/microdata.html#names:-the-itemprop-attribute
CSV_ATTRIBUTES = {
    "accept",
    "media",
}

SSV_ATTRIBUTES = {
    "accept-charset",
    "accesskey",
    "class",
    "dropzone",
    "headers",
    "itemprop",
    "rel",
    "sandbox",
    "sizes",
}


class DelimiterTable:
    """Attribute name to token delimiter registry."""

    def __init__(self):
        self.name2delimiter = {}
        self._lock = threading.Lock()
        self._populated = False

    def _populate(self):
        if self._populated:
            return
        with self._lock:
            if not self._populated:
                for name in CSV_ATTRIBUTES:
                    self.name2delimiter[name] = ","
                for name in SSV_ATTRIBUTES:
                    self.name2delimiter[name] = " "
                self._populated = True

    def get(self, name):
        """Get the delimiter for an attribute.

        Args:
            name (str): Attribute name (case-insensitive).

        Returns:
            The delimiter (`str`), or `None` if the attribute is not
            a token list.
        """
        if not isinstance(name, str):
            return None
        self._populate()
        return self.name2delimiter.get(name.lower())

    def keys(self):
        """Get registered attribute names."""
        self._populate()
        return self.name2delimiter.keys()

    def load(self, filename):
        """Register delimiters from a YAML file.

        The format is:
            delimiters:
                <attr>: <delimiter>

        Raises:
            ConfigError: The file cannot be read or parsed.
        """
        from .config import load_config

        load_config(filename).setup_delimiters(self)

    def register(self, name, delimiter):
        """Register a delimiter for an attribute.

        Silently ignored if `name` already has a delimiter.

        Args:
            name (str): Attribute name (case-insensitive).
            delimiter (str): Token delimiter, e.g., " " or ",".

        Returns:
            The delimiter in effect for `name` after the call.
        """
        if not isinstance(name, str) or not isinstance(delimiter, str):
            return self.get(name)
        self._populate()
        name = name.lower()
        with self._lock:
            current = self.name2delimiter.get(name)
            if current is None:
                logger.debug(f"registered delimiter ({name=} {delimiter=})")
                self.name2delimiter[name] = delimiter
                return delimiter
        logger.debug(f"ignored delimiter ({name=} {delimiter=}), already ({current!r})")
        return current


# available globally
table = DelimiterTable()


def get_delimiter(name):
    """Get the delimiter for attribute `name` from the global table."""
    return table.get(name)


def register_delimiter(name, delimiter):
    """Register a delimiter for attribute `name` in the global table."""
    return table.register(name, delimiter)
