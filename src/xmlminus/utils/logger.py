"""Logger lookup for xmlminus modules.

Every module logs under the ``xmlminus`` namespace: the lexer warns when
scanning stops on unrecognized text, and the recognizer and parser report
token and production counts at DEBUG. Handlers are installed only by the
command line front end.

Example:
    >>> from xmlminus.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanned %d tokens", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get the xmlminus logger for a module.

    Names outside the package are placed under ``xmlminus.`` so that
    ``logging.getLogger("xmlminus")`` controls all output.

    Example:
        >>> get_logger("xmlminus.parser").name
        'xmlminus.parser'
        >>> get_logger("scratch").name
        'xmlminus.scratch'
    """
    if not (name == "xmlminus" or name.startswith("xmlminus.")):
        name = f"xmlminus.{name}"
    return logging.getLogger(name)
