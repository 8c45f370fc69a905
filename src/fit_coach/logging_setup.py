import logging
import re

_DB_PASSWORD = re.compile(r"(://[^:/@\s]+:)[^@\s]+@")


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that redacts database credentials from log messages.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _DB_PASSWORD.sub(r"\1<REDACTED>@", record.msg)
        if record.args:
            if isinstance(record.args, tuple):
                record.args = tuple(
                    _DB_PASSWORD.sub(r"\1<REDACTED>@", a) if isinstance(a, str) else a
                    for a in record.args
                )
        return True


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Set up root logger with a redacting stream handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.addFilter(SensitiveDataFilter())
    root.addHandler(ch)
