# afm_checker/exceptions.py
# Exceptions shared by the adapter, the reply parser and the executor


class AfmCheckerError(Exception):
    pass


class InvalidRequestError(AfmCheckerError, ValueError):
    """Caller-supplied query parameters are unusable."""


class TransportFault(AfmCheckerError):
    """The SOAP call did not complete (network, service or credentials)."""

    def __init__(self, message: str, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class MalformedReplyError(AfmCheckerError):
    """The registry answered with a shape we do not understand."""


class InvalidActivityCodeError(MalformedReplyError, ValueError):
    pass
