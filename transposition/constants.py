"""Defaults for the transposition command line."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Log level used when --log-level is not given."""

DEFAULT_INSTRUMENT = "C"
"""Instrument key assumed when --source or --target is not given."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
"""Format string for log records."""

EXIT_UNKNOWN_INPUT = 2
"""Exit status when an input matches no table entry."""
