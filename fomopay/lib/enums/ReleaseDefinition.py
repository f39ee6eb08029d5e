from enum import StrEnum


class ReleaseDefinition(StrEnum):
    NAME = "fomopay-client"
    VERSION = "v0.3.0"
    VERSION_NUMBER = "0.3.0"
    RELEASE = "Oct 2026"
    PROTOCOL = "FomoPay POS RPC, ISO 8583 over JSON"
