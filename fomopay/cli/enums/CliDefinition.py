from enum import StrEnum, IntEnum


class CliDefinition(StrEnum):
    SALE = "sale"
    QUERY = "query"
    REFUND = "refund"
    VOID = "void"
    BATCH = "batch"


class CliExitCodes(IntEnum):
    SUCCESS = 0
    PROCESSING_ERROR = 1
    VALIDATION_ERROR = 2
