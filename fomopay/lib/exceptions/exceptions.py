from http import HTTPStatus


class FomoPayError(Exception):
    pass


class DataValidationError(FomoPayError):
    pass


class KeyFormatError(FomoPayError):
    pass


class SignatureError(FomoPayError):
    pass


class ProtocolError(FomoPayError):
    pass


class TransportError(FomoPayError):
    def __init__(self, detail: str | Exception, http_status: HTTPStatus | int | None = None, body: str | None = None):
        self.detail = str(detail)
        self.http_status = http_status
        self.body = body

        super().__init__(self.detail)

    def __str__(self):
        if self.http_status is None:
            return self.detail

        return f"HTTP Error {int(self.http_status)}: {self.detail}"
