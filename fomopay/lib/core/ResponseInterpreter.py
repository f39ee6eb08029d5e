from json import dumps, loads, JSONDecodeError
from loguru import logger
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from fomopay.lib.core.Authenticator import Authenticator
from fomopay.lib.data_models.TransactionResult import TransactionResult
from fomopay.lib.enums.AuthHeaders import AuthHeaders
from fomopay.lib.enums.ProtocolField import ProtocolField, ResponseKey
from fomopay.lib.enums.TransactionKind import TransactionKind
from fomopay.lib.exceptions.exceptions import ProtocolError
from fomopay.lib.toolkit.hex_codec import hex_to_text


class ResponseInterpreter:

    """
    Parses the host response into the TransactionResult

    The interpreter doesn't decide whether the transaction is approved, the status code is returned as is. Sale
    responses carry the host signature, it is verified against the raw response body

    The host occasionally answers a sale with a non-JSON body. Such a body is returned in the result unparsed
    """

    def __init__(self, authenticator: Authenticator | None = None):
        if authenticator is None:
            authenticator = Authenticator()

        self.authenticator = authenticator

    def interpret(self, raw_body: str, kind: TransactionKind,
                  public_key: RSAPublicKey | None = None) -> TransactionResult:
        if not raw_body:
            raise ProtocolError(f"Empty response from host on {kind} request")

        try:
            response = loads(raw_body)

        except JSONDecodeError as json_error:
            response = None

            if kind != TransactionKind.SALE:
                raise ProtocolError(f"Cannot parse {kind} response as JSON: {json_error}") from json_error

        if not isinstance(response, dict):
            if kind != TransactionKind.SALE:
                raise ProtocolError(f"Host response to {kind} request is not a JSON object")

            logger.warning("Cannot parse sale response, the raw response will be returned")

            return TransactionResult(kind=kind, raw=raw_body, parsed=False)

        if ProtocolField.RESPONSE_CODE not in response:
            if error := response.get(ResponseKey.ERROR):
                raise ProtocolError(f"API Error: {error}")

            raise ProtocolError("Invalid response format: missing status code")

        result = TransactionResult(
            kind=kind,
            status_code=self.get_text(response, ProtocolField.RESPONSE_CODE),
            error_message=self.decode_error_message(response),
            hint=self.get_text(response, ResponseKey.HINT),
            raw=raw_body,
            fields=response,
        )

        if kind == TransactionKind.SALE:
            result.signature_verified = self.verify_response(raw_body, response, public_key)

        return result

    @staticmethod
    def get_text(response: dict, key: str) -> str | None:
        if (value := response.get(key)) is None:
            return None

        return value if isinstance(value, str) else dumps(value, ensure_ascii=False)

    @staticmethod
    def decode_error_message(response: dict) -> str | None:
        if (hex_message := response.get(ProtocolField.ERROR_MESSAGE)) is None:
            return None

        try:
            return hex_to_text(str(hex_message))

        except ValueError as decoding_error:
            error = f"Cannot decode field {ProtocolField.ERROR_MESSAGE}: {decoding_error}"
            raise ProtocolError(error) from decoding_error

    @staticmethod
    def get_response_signature(response: dict) -> str | None:
        if signature := response.get(AuthHeaders.SIGN):
            return str(signature)

        headers = response.get(ResponseKey.HEADERS)

        if isinstance(headers, dict) and (signature := headers.get(AuthHeaders.SIGN)):
            return str(signature)

        return None

    def verify_response(self, raw_body: str, response: dict, public_key: RSAPublicKey | None) -> bool | None:
        if not (signature := self.get_response_signature(response)):
            logger.info("Response has no signature, verification skipped")
            return None

        if public_key is None:
            logger.warning("Response is signed, but no public key is set. Verification skipped")
            return None

        verified = self.authenticator.verify(raw_body, signature, public_key)

        logger.info(f"Response signature verified: {verified}")

        return verified
