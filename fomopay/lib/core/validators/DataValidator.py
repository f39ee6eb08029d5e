from urllib.parse import urlparse
from fomopay.lib.exceptions.exceptions import DataValidationError

STAN_MAX = 999999
AMOUNT_LIMIT = 10 ** 12  # field 88/89 holds 12 digits
ALLOWED_SCHEMES = ("https",)


class DataValidator:

    @staticmethod
    def validate_stan(stan: int) -> int:
        if isinstance(stan, bool) or not isinstance(stan, int):
            raise DataValidationError(f"STAN must be an integer, got {type(stan).__name__}")

        if not 0 <= stan <= STAN_MAX:
            raise DataValidationError(f"STAN must be a 6-digit number in range 0-{STAN_MAX}, got {stan}")

        return stan

    @staticmethod
    def validate_amount(amount: int) -> int:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise DataValidationError(f"Amount must be an integer number of minor units, got {type(amount).__name__}")

        if amount < 0:
            raise DataValidationError(f"Amount cannot be negative, got {amount}")

        if amount >= AMOUNT_LIMIT:
            raise DataValidationError(f"Amount {amount} does not fit into 12 digits")

        return amount

    @staticmethod
    def validate_url(url: str, allowed_hosts: list[str]) -> str:
        try:
            parsed_url = urlparse(url)
        except ValueError as url_parsing_error:
            raise DataValidationError(f"Cannot parse URL {url}: {url_parsing_error}")

        if parsed_url.scheme not in ALLOWED_SCHEMES:
            raise DataValidationError(f"URL scheme must be one of {', '.join(ALLOWED_SCHEMES)}, got {url}")

        if not parsed_url.hostname:
            raise DataValidationError(f"Lost host name in URL {url}")

        if parsed_url.hostname.lower() not in allowed_hosts:
            raise DataValidationError(f"Host {parsed_url.hostname} is not in the list of allowed hosts")

        return url
