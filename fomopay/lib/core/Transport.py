from http import HTTPStatus
from loguru import logger
from requests import post, RequestException, Response
from fomopay.lib.data_models.Config import Config
from fomopay.lib.core.validators.DataValidator import DataValidator
from fomopay.lib.exceptions.exceptions import DataValidationError, TransportError


class Transport:
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config):
        self.config = config

    @property
    def timeout(self) -> tuple[float, float]:
        return self.config.host.connect_timeout_seconds, self.config.host.read_timeout_seconds

    def post(self, url: str, payload: str, headers: dict[str, str]) -> str:
        try:
            DataValidator.validate_url(url, self.config.host.allowed_hosts)

        except DataValidationError as url_validation_error:
            raise TransportError(f"Request rejected: {url_validation_error}") from url_validation_error

        logger.info(f"Sending POST request to {url}")
        logger.debug(f"Request body: {payload}")

        try:
            resp: Response = post(
                url, data=payload.encode("utf-8"), headers=headers, timeout=self.timeout, allow_redirects=False
            )

        except RequestException as connection_error:
            raise TransportError(f"Cannot send request to {url}: {connection_error}") from connection_error

        body: str = self.read_body(resp)

        logger.debug(f"Got response with http-code {resp.status_code}: {body}")

        if HTTPStatus.MULTIPLE_CHOICES <= resp.status_code < HTTPStatus.BAD_REQUEST:
            location = resp.headers.get("Location", str())
            raise TransportError(f"Redirect to {location} refused", http_status=resp.status_code, body=body)

        if resp.status_code >= HTTPStatus.BAD_REQUEST:
            raise TransportError(body, http_status=resp.status_code, body=body)

        return body

    @staticmethod
    def read_body(resp: Response) -> str:
        text = resp.content.decode("utf-8", errors="replace")

        return str().join(line.strip() for line in text.splitlines())
