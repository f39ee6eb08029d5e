LOG_MAX_SIZE_MEGABYTES = 10
COMPRESSION = "zip"
LOGFILE_DATE_FORMAT = "{time:DD.MM.YYYY HH:mm:ss.SSS} [{level:^8}] {message}"
DISPLAY_DATE_FORMAT = "{time:HH:mm:ss} [{level:^8}] {message}"
DEFAULT_LEVEL = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
