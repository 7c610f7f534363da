"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Business outcomes such as a rejected loan are never raised; domain
    exceptions signal that a collaborator could not do its job.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
