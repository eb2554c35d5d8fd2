import logging
import sys


def setup_logging(level="INFO"):
    """
    Send every log record at `level` and above to stderr.
    Call once, before the app is built.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # drop handlers left over from an earlier call
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
