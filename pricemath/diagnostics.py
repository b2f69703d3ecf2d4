"""Diagnostic output.

Kept apart from prices.py so the pure functions can be tested without
capturing output streams.
"""

import logging
import sys
from typing import TextIO

_logger = logging.getLogger("pricemath.diagnostics")

STATEMENT_MESSAGE = "what"


def statement(stream: TextIO | None = None) -> None:
    """Write the fixed diagnostic message to stream (default: stdout)."""
    out = stream if stream is not None else sys.stdout
    _logger.debug("Emitting diagnostic statement")
    print(STATEMENT_MESSAGE, file=out)
