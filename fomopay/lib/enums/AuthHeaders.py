from enum import StrEnum


class AuthHeaders(StrEnum):
    VERSION = "X-Authentication-Version"
    METHOD = "X-Authentication-Method"
    KEY_ID = "X-Authentication-KeyId"
    NONCE = "X-Authentication-Nonce"
    TIMESTAMP = "X-Authentication-Timestamp"
    SIGN = "X-Authentication-Sign"
    CONTENT_TYPE = "Content-Type"


class AuthValues(StrEnum):
    VERSION = "1.1"
    METHOD = "SHA256WithRSA"
    CONTENT_TYPE = "application/json"
