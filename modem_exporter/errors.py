"""Error taxonomy for a scrape: transport, parsing, device API, encoding."""


class ModemError(Exception):
    """Base class for every failure that aborts a scrape."""


class TransportError(ModemError):
    """Connection failure or non-success HTTP status from the modem."""


class ParseError(ModemError):
    """Response body does not match the expected XML schema."""


class ApiError(ModemError):
    """The modem answered with an <error> envelope."""

    def __init__(self, code: int, message: str):
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self):
        return f"api error: code={self.code} message={self.message}"


class EncodingError(ModemError):
    """The metrics document could not be rendered."""
