"""Logger helper for Listo.

The engine logs one DEBUG record per gesture (``listo.transform``) and the
buffer adapter logs filetype passthroughs (``listo.buffer``). Nothing is
emitted unless the host enables DEBUG on the ``listo`` logger; no handlers
are installed here.

Example:
    >>> import logging
    >>> logging.getLogger("listo").setLevel(logging.DEBUG)
    >>> get_logger(__name__).name
    'listo.utils.logger'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``listo`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance, prefixed with "listo." when needed

    Example:
        >>> get_logger("host.adapter").name
        'listo.host.adapter'
    """
    if not (name == "listo" or name.startswith("listo.")):
        name = f"listo.{name}"
    return logging.getLogger(name)
