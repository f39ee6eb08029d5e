"""
Pytest fixtures: RSA keys, configuration and a transport stub, so no test goes to the network
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fomopay.lib.data_models.Config import Config, MerchantConfig, DebugConfig, KeysConfig
from fomopay.lib.exceptions.exceptions import TransportError

TERMINAL_ID = "10000007"
MERCHANT_ID = "110000000000849"
KEY_ID = "a5142d28-7a40-4f39-b22a-1c26287d8aff"


def generate_rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_key():
    return generate_rsa_key()


@pytest.fixture(scope="session")
def other_rsa_key():
    return generate_rsa_key()


@pytest.fixture(scope="session")
def pkcs1_private_pem(rsa_key) -> bytes:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def pkcs8_private_pem(rsa_key) -> bytes:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def public_pem(rsa_key) -> bytes:
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        merchant=MerchantConfig(key_id=KEY_ID, terminal_id=TERMINAL_ID, merchant_id=MERCHANT_ID),
        keys=KeysConfig(
            private_key=str(tmp_path / "private_key.pem"),
            public_key=str(tmp_path / "public_key.pem"),
        ),
        debug=DebugConfig(print_to_stdout=False, log_file=str(tmp_path / "fomopay.log")),
    )


class FakeTransport:
    """Records the requests and answers with a prepared body or error"""

    def __init__(self, body: str = '{"39":"00"}', error: Exception | None = None, on_post=None):
        self.body = body
        self.error = error
        self.on_post = on_post
        self.requests: list[tuple[str, str, dict[str, str]]] = []

    def post(self, url: str, payload: str, headers: dict[str, str]) -> str:
        self.requests.append((url, payload, headers))

        if self.on_post is not None:
            self.on_post(url, payload, headers)

        if self.error is not None:
            raise self.error

        return self.body


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(error=TransportError("Internal error", http_status=500, body="Internal error"))


@pytest.fixture
def make_transport():
    return FakeTransport
