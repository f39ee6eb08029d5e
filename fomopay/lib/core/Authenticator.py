from time import time
from secrets import token_bytes
from loguru import logger
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.asymmetric.padding import PKCS1v15
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from fomopay.lib.data_models.AuthenticationHeaders import AuthenticationHeaders
from fomopay.lib.exceptions.exceptions import SignatureError
from fomopay.lib.toolkit.hex_codec import bytes_to_hex, hex_to_bytes

NONCE_BYTES = 16


class Authenticator:

    """
    SHA256WithRSA request authentication

    The request signature covers payload + timestamp + nonce, concatenated as is, without separators. The response
    signature covers the response body only
    """

    @staticmethod
    def generate_nonce() -> str:
        return bytes_to_hex(token_bytes(NONCE_BYTES))

    @staticmethod
    def generate_timestamp() -> int:
        return int(time())

    @staticmethod
    def sign(payload: str, timestamp: int, nonce: str, private_key: RSAPrivateKey) -> str:
        if not isinstance(private_key, RSAPrivateKey):
            raise SignatureError(f"Cannot sign the request: RSA private key required, got {type(private_key).__name__}")

        data_to_sign = f"{payload}{timestamp}{nonce}".encode("utf-8")

        try:
            signature = private_key.sign(data_to_sign, PKCS1v15(), SHA256())

        except (ValueError, TypeError) as signing_error:
            raise SignatureError(f"Cannot sign the request: {signing_error}") from signing_error

        return bytes_to_hex(signature)

    @staticmethod
    def verify(payload: str, signature: str, public_key: RSAPublicKey) -> bool:
        if not isinstance(public_key, RSAPublicKey):
            raise SignatureError(f"Cannot verify: RSA public key required, got {type(public_key).__name__}")

        try:
            signature_bytes = hex_to_bytes(signature)

        except (ValueError, TypeError) as hex_error:
            raise SignatureError(f"Signature is not a valid hex string: {hex_error}") from hex_error

        try:
            public_key.verify(signature_bytes, payload.encode("utf-8"), PKCS1v15(), SHA256())

        except InvalidSignature:
            logger.warning("Signature verification failed")
            return False

        except (ValueError, TypeError) as verification_error:
            raise SignatureError(f"Cannot verify the signature: {verification_error}") from verification_error

        return True

    def authenticate(self, payload: str, key_id: str, private_key: RSAPrivateKey, timestamp: int | None = None,
                     nonce: str | None = None) -> AuthenticationHeaders:

        if timestamp is None:
            timestamp = self.generate_timestamp()

        if nonce is None:
            nonce = self.generate_nonce()

        signature = self.sign(payload, timestamp, nonce, private_key)

        return AuthenticationHeaders(key_id=key_id, nonce=nonce, timestamp=timestamp, sign=signature)
