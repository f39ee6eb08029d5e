from enum import StrEnum


class ProtocolField(StrEnum):
    MESSAGE_TYPE = "0"
    BITMAP = "1"
    PROCESSING_CODE = "3"
    TRANSMISSION_DATE_TIME = "7"
    STAN = "11"
    LOCAL_TIME = "12"
    LOCAL_DATE = "13"
    MERCHANT_TYPE = "18"
    SERVICE_CONDITION = "25"
    RETRIEVAL_REFERENCE = "37"
    RESPONSE_CODE = "39"
    TERMINAL_ID = "41"
    MERCHANT_ID = "42"
    CURRENCY = "49"
    DEBIT_AMOUNT = "88"
    CREDIT_AMOUNT = "89"
    DESCRIPTION = "104"
    ERROR_MESSAGE = "113"


class ResponseKey(StrEnum):
    HINT = "hint"
    ERROR = "error"
    HEADERS = "headers"
