from enum import StrEnum


class TermDirs(StrEnum):
    LOG_DIR = "fomopay/log"
    SETTINGS_DIR = "fomopay/settings"


class TermFilesPath(StrEnum):
    CONFIG = f"{TermDirs.SETTINGS_DIR}/config.json"
    LOG_FILE_NAME = f"{TermDirs.LOG_DIR}/fomopay.log"
    PRIVATE_KEY = "private_key.pem"
    PUBLIC_KEY = "public_key.pem"
