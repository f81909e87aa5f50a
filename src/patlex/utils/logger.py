"""Logger namespace for patlex.

Every module logs under the ``patlex`` hierarchy: ``patlex.builder`` records
each successful build at DEBUG, and ``patlex.stream`` records scan failures
(no matching rule, zero-width match, failing action) at DEBUG before the
exception propagates. No handlers are installed; turn the records on with::

    import logging
    logging.basicConfig()
    logging.getLogger("patlex").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``patlex`` namespace.

    Names already under ``patlex`` are used as is, so ``get_logger(__name__)``
    from ``patlex.stream`` gives ``patlex.stream``.

    Example:
        >>> get_logger("builder").name
        'patlex.builder'
    """
    if not (name == "patlex" or name.startswith("patlex.")):
        name = f"patlex.{name}"
    return logging.getLogger(name)
