import logging
import sys

_HANDLER_NAME = "simplifier"
_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a single stdout handler to the 'simplifier' logger tree.

    Safe to call more than once (e.g. when tests build several apps).
    """
    root = logging.getLogger("simplifier")
    root.setLevel(level.upper())

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
