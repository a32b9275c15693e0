import logging
import logging.config
import os

from rich.console import Console
from rich.logging import RichHandler


class LoggingConfig:
    """
    Logging for one job folder.

    Everything reaches the rich console and ``logs/program.*``. Warnings about
    the curriculum data itself (duplicate ids, unknown references, unknown
    statuses) are also collected in ``logs/curriculum.warn`` so a broken data
    file can be fixed without reading the whole run log.
    """

    _console = None

    DATA_LOGGERS = ("CurriculumGraph.graph", "CurriculumGraph.curriculum")

    def __init__(self, folder, log_level=logging.INFO):
        log_directory = os.path.join(folder, "logs")
        os.makedirs(log_directory, exist_ok=True)

        self.log_level = log_level
        self.log_directory = log_directory
        self.data_warnings_path = os.path.join(log_directory, "curriculum.warn")

        self.LOGGING = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "detailed": {
                    "format": "%(asctime)s "
                    "- %(levelname)s "
                    "- %(name)s:%(lineno)d "
                    "- %(message)s",
                },
                "data": {
                    "format": "%(levelname)s [%(name)s] %(message)s",
                },
                "simple": {
                    "format": "%(message)s",
                },
            },
            "handlers": {
                "program_out_file": self._file_handler(
                    "program.out", "simple", logging.INFO
                ),
                "logfile": self._file_handler("program.log", "detailed", log_level),
                "errorfile": self._file_handler("program.err", "simple", logging.ERROR),
                "commandfile": self._file_handler(
                    "program.com", "simple", logging.INFO
                ),
                "datafile": self._file_handler(
                    "curriculum.warn", "data", logging.WARNING
                ),
            },
            "loggers": {
                "": {
                    "handlers": ["program_out_file", "logfile", "errorfile"],
                    "level": log_level,
                },
                "commands": {
                    "handlers": ["commandfile"],
                    "level": logging.INFO,
                    "propagate": False,
                },
                **{name: {"handlers": ["datafile"]} for name in self.DATA_LOGGERS},
            },
        }

    def _file_handler(self, filename, formatter, level):
        return {
            "class": "logging.FileHandler",
            "filename": os.path.join(self.log_directory, filename),
            "formatter": formatter,
            "level": level,
        }

    def setup_logging(self):
        logging.config.dictConfig(self.LOGGING)

        rich_handler = RichHandler(
            console=LoggingConfig.get_console(),
            markup=True,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
        )
        rich_handler.setLevel(logging.INFO)
        logging.getLogger().addHandler(rich_handler)

        return logging.getLogger(__name__)

    @classmethod
    def get_console(cls):
        if cls._console is None:
            cls._console = Console()
        return cls._console

    @classmethod
    def reset(cls):
        """Close and detach every handler this configuration installs."""
        for name in ("", "commands", *cls.DATA_LOGGERS):
            logger = logging.getLogger(name)
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)

    def update_logging_level(self, log_level):
        """
        Follow ``log_level`` in ``program.log`` only. The console, the plain
        output, the error and command files and the data warnings keep their
        fixed levels.
        """
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            if handler.get_name() == "logfile":
                handler.setLevel(log_level)
