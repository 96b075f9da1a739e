import logging


class DebugStreamHandler(logging.StreamHandler):
    """Stderr handler installed by :func:`configure_debug_logging`."""


def configure_debug_logging() -> logging.Logger:
    """
    Send geom3d debug records to stderr.

    Attaches one DebugStreamHandler to the package logger and sets it to
    DEBUG. Calling it again does not add a second handler.
    """
    log = logging.getLogger("geom3d")
    if not any(isinstance(h, DebugStreamHandler) for h in log.handlers):
        handler = DebugStreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
        log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    return log
