from enum import StrEnum


class PemLabel(StrEnum):
    RSA_PRIVATE_KEY = "RSA PRIVATE KEY"
    PRIVATE_KEY = "PRIVATE KEY"
    PUBLIC_KEY = "PUBLIC KEY"
    RSA_PUBLIC_KEY = "RSA PUBLIC KEY"
