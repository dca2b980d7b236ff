#! /usr/bin/env python3
#
# phat/config.py

"""Configuration (YAML) and logging setup.

The format is:
    delimiters:
        <attr>: <delimiter>
    strict-attribute-names: <bool>
    logging:
        enable: <bool>
        handler: file|stream
        filename: <path>
        level: <level>
        format: <format>
"""

import logging

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class ConfigError(Exception):
    pass


class PhatConfig(dict):
    """Dictionary with special methods."""

    def is_strict(self):
        """Return if attribute names must start with a letter."""
        return bool(self.get("strict-attribute-names", False))

    def setup_delimiters(self, table=None):
        """Register configured delimiters.

        Args:
            table (DelimiterTable|None): Table to register with.
                Defaults to the global table.

        Returns:
            List of names registered (or already registered).
        """
        from .delimiters import table as global_table

        table = table if table is not None else global_table
        delimiters = self.get("delimiters") or {}
        if not isinstance(delimiters, dict):
            logger.warning(f"ignoring delimiters, not a mapping ({delimiters=})")
            return []

        names = []
        for name, delimiter in delimiters.items():
            if not isinstance(name, str) or not isinstance(delimiter, str):
                logger.warning(f"ignoring delimiter ({name=} {delimiter=})")
                continue
            table.register(name, delimiter)
            names.append(name)
        return names


def load_config(filename):
    """Load configuration from a YAML file.

    Args:
        filename (str): Path of YAML file.

    Returns:
        `PhatConfig`.

    Raises:
        ConfigError: File cannot be read, parsed, or is not a mapping.
    """
    try:
        with open(filename, "r") as f:
            d = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.debug(f"EXCEPTION ({e})")
        raise ConfigError(f"bad/missing configuration file ({filename})") from e

    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ConfigError(f"configuration is not a mapping ({filename})")

    config = PhatConfig()
    config.update(d)
    logger.debug(f"{config=}")
    return config


def setup_logging(config):
    """Set up logging.

    Nothing is done unless `logging.enable` is set and a handler is
    configured.

    Returns:
        True if logging was configured.
    """
    loggingconf = config.get("logging")
    if loggingconf is None or not loggingconf.get("enable", False):
        return False

    logfilename = loggingconf.get("filename")
    logformat = loggingconf.get("format", DEFAULT_LOG_FORMAT)
    loghandler = loggingconf.get("handler")
    loglevel = loggingconf.get("level", "CRITICAL")

    kwargs = {
        "level": logging.getLevelName(loglevel) if isinstance(loglevel, str) else loglevel,
        "format": logformat,
    }
    if loghandler == "file":
        if logfilename:
            kwargs["handlers"] = [logging.FileHandler(logfilename)]
    elif loghandler == "stream":
        kwargs["handlers"] = [logging.StreamHandler()]

    # only if there is a handler
    if not kwargs.get("handlers"):
        return False
    logging.basicConfig(**kwargs)
    return True
