from pydantic import BaseModel, Field, PositiveFloat, field_validator
from fomopay.lib.constants import LogDefinition
from fomopay.lib.enums.TermFilesPath import TermFilesPath


class HostConfig(BaseModel):
    api_url: str = "https://pos.fomopay.net/rpc"
    allowed_hosts: list[str] = ["pos.fomopay.net"]
    connect_timeout_seconds: PositiveFloat = 5.0
    read_timeout_seconds: PositiveFloat = 10.0

    @field_validator("allowed_hosts", mode="after")
    @classmethod
    def lower_hosts(cls, val):
        return [host.lower() for host in val]


class MerchantConfig(BaseModel):
    key_id: str = Field(min_length=1)
    terminal_id: str = Field(min_length=1)
    merchant_id: str = Field(min_length=1)
    currency: str = "SGD"
    merchant_type: str = "0005"
    service_condition: str = "30"


class KeysConfig(BaseModel):
    private_key: str = TermFilesPath.PRIVATE_KEY
    public_key: str = TermFilesPath.PUBLIC_KEY


class DebugConfig(BaseModel):
    level: str = LogDefinition.DEFAULT_LEVEL
    print_to_stdout: bool = True
    log_file: str = TermFilesPath.LOG_FILE_NAME

    @field_validator("level", mode="before")
    @classmethod
    def check_level(cls, val: str):
        val = str(val).upper()

        if val not in LogDefinition.LOG_LEVELS:
            raise ValueError(f"Unknown log level {val}. Allowed levels: {', '.join(LogDefinition.LOG_LEVELS)}")

        return val


class Config(BaseModel):
    host: HostConfig = HostConfig()
    merchant: MerchantConfig
    keys: KeysConfig = KeysConfig()
    debug: DebugConfig = DebugConfig()
