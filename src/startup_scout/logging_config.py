# startup_scout/logging_config.py

import logging

# third-party loggers that are noisy below WARNING
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(verbose: bool = False) -> None:
    """
    Configure process-wide logging for command-line runs.

    Library modules only obtain their own loggers and never configure logging;
    this is called once by the CLI entry point. Output goes to stderr so JSON
    written to stdout stays parseable.

    Args:
        verbose (bool): Log at DEBUG instead of INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
