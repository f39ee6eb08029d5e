from sys import stdout
from loguru import logger
from fomopay.lib.data_models.Config import Config
from fomopay.lib.constants import LogDefinition


class Logger:

    """
    Loguru setup for the client run: the log file is always written, the stdout copy is optional. Handlers set up
    before, including the loguru default one, are removed
    """

    rotation = f"{LogDefinition.LOG_MAX_SIZE_MEGABYTES} MB"
    compression = LogDefinition.COMPRESSION
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    @property
    def common_params(self) -> dict:
        return dict(level=self.config.debug.level, backtrace=False, diagnose=False)

    def __init__(self, config: Config):
        self.config = config
        self.handlers: list[int] = []
        self.setup()

    def setup(self):
        logger.remove()

        self.handlers.append(self.add_file_handler())

        if self.config.debug.print_to_stdout:
            self.handlers.append(self.add_stdout_handler())

    def add_file_handler(self, filename: str | None = None) -> int:
        if filename is None:
            filename = self.config.debug.log_file

        return logger.add(
            filename,
            format=LogDefinition.LOGFILE_DATE_FORMAT,
            rotation=self.rotation,
            compression=self.compression,
            encoding="utf-8",
            **self.common_params,
        )

    def add_stdout_handler(self) -> int:
        return logger.add(stdout, format=LogDefinition.DISPLAY_DATE_FORMAT, **self.common_params)

    def shutdown(self):
        for handler_id in self.handlers:
            logger.remove(handler_id)

        self.handlers.clear()
