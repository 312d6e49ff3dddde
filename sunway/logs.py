from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "sunway-stdout"


def configure_logging(level: str = "INFO") -> None:
    """Send ``sunway.*`` records to stdout as bare messages.

    The banner and the per-request access lines are already fully formatted,
    so the handler adds nothing around them. Calling this twice does not
    install a second handler.
    """
    root = logging.getLogger("sunway")
    root.setLevel(level.upper())
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
