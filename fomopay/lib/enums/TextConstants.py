from enum import StrEnum
from fomopay.lib.enums.ReleaseDefinition import ReleaseDefinition


class TextConstants(StrEnum):
    SYSTEM_NAME = "FOMOPAY CLIENT"

    HELLO_MESSAGE = f"""
  {SYSTEM_NAME} {ReleaseDefinition.VERSION} | Released in {ReleaseDefinition.RELEASE}

  {ReleaseDefinition.PROTOCOL}"""

    CLI_DESCRIPTION = f"{SYSTEM_NAME} {ReleaseDefinition.VERSION}. Signed ISO 8583 requests to the FomoPay host"

    NO_SIGNATURE = "not present"
    RAW_RESPONSE = "Raw Response"
