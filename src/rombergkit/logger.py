"""Contains the name for the logger of RombergKit modules.

``rombergkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: The resolution plan chosen for a given sample count.
* ``INFO``: An indication that an input was accepted with reduced accuracy,
    e.g. two samples (plain trapezoid rule) or a prime ``N - 1``.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. non-finite estimates.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``rombergkit.logger.rombergkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "rombergkit"
rombergkit_logger = logging.getLogger(logger_name)
