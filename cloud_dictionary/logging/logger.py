import logging
from enum import Enum

from cloud_dictionary.logging.rich_console_handler import RichConsoleHandler


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Logger:
    """
    Logs the messages of the dictionary store. Wraps a standard library logger that prints
    through a Rich console handler.
    """

    def __init__(self):
        self.logger = logging.getLogger("cloud_dictionary")
        self.logger.setLevel(logging.INFO)
        if not self.logger.handlers:
            self.logger.addHandler(RichConsoleHandler())

    def set_level(self, level: LogLevel | str) -> None:
        if isinstance(level, str):
            level = LogLevel(level.upper())
        self.logger.setLevel(level.value)

    def debug(self, message: str, *args, **kwargs) -> None:
        stacklevel = kwargs.pop("stacklevel", 2)
        self.logger.debug(message, *args, **kwargs, stacklevel=stacklevel)

    def info(self, message: str, *args, **kwargs) -> None:
        stacklevel = kwargs.pop("stacklevel", 2)
        self.logger.info(message, *args, **kwargs, stacklevel=stacklevel)

    def warning(self, message: str, *args, **kwargs) -> None:
        stacklevel = kwargs.pop("stacklevel", 2)
        self.logger.warning(message, *args, **kwargs, stacklevel=stacklevel)

    def error(self, message: str, *args, **kwargs) -> None:
        stacklevel = kwargs.pop("stacklevel", 2)
        self.logger.error(message, *args, **kwargs, stacklevel=stacklevel)


log = Logger()
