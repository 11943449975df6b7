class RialtorError(Exception):
    """Base class for all RIALTOR domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except RialtorError`` clause can catch any domain error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class InvalidAgentLevelError(RialtorError):
    """Raised when a value is not one of the known agent levels."""

    def __init__(self, detail: str = "Invalid agent level"):
        super().__init__(detail)


class InvalidProspectOriginError(RialtorError):
    """Raised when a value is not one of the known prospect origins."""

    def __init__(self, detail: str = "Invalid prospect origin"):
        super().__init__(detail)


class InvalidProspectCountError(RialtorError):
    """Raised when a prospect count is negative or not an integer."""

    def __init__(self, detail: str = "Prospect counts must be non-negative integers"):
        super().__init__(detail)


class InvalidProjectionInputError(RialtorError):
    """Raised when projection inputs are outside their allowed range.

    Pydantic rejects most of these at request parsing time (HTTP 422).
    Kept for callers that invoke ``ProjectionService`` in-process.
    """

    def __init__(self, detail: str = "Invalid projection input"):
        super().__init__(detail)
