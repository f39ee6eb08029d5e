from pydantic import BaseModel, ConfigDict, Field
from fomopay.lib.enums.AuthHeaders import AuthHeaders, AuthValues


class AuthenticationHeaders(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = AuthValues.VERSION
    method: str = AuthValues.METHOD
    key_id: str = Field(min_length=1)
    nonce: str = Field(min_length=1)
    timestamp: int
    sign: str = Field(min_length=1)
    content_type: str = AuthValues.CONTENT_TYPE

    def as_http_headers(self) -> dict[str, str]:
        return {
            AuthHeaders.VERSION: str(self.version),
            AuthHeaders.METHOD: str(self.method),
            AuthHeaders.KEY_ID: self.key_id,
            AuthHeaders.NONCE: self.nonce,
            AuthHeaders.TIMESTAMP: str(self.timestamp),
            AuthHeaders.SIGN: self.sign,
            AuthHeaders.CONTENT_TYPE: str(self.content_type),
        }
