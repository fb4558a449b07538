class ParamValueError(ValueError):
    """A query parameter value is outside its allowed set or range."""


class ParamStateError(RuntimeError):
    """A parameter that is fixed at construction was set again."""


class ResultParseError(ValueError):
    """The OMDb payload holds a field that cannot be normalized."""


class SearchError(Exception):
    """
    Base class for search outcomes that are not a result list.
    Each subclass carries the HTTP status code the route answers with.
    """
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(SearchError):
    status_code = 400


class NotFoundError(SearchError):
    status_code = 404


class UnprocessableEntityError(SearchError):
    status_code = 422


class ServiceUnavailableError(SearchError):
    status_code = 503


class GatewayTimeoutError(SearchError):
    status_code = 504
