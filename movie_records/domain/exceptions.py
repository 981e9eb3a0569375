class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    """Raised when an operation addresses an id with no matching document.

    Carries the offending id in ``resource_id`` so callers can branch on
    ``kind`` without parsing the message.
    """

    kind = "not_found"
    resource = "Resource"

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"{self.resource} with ID {resource_id} not found")


class MovieNotFoundError(NotFoundError):
    resource = "Movie"

    @property
    def movie_id(self) -> str:
        return self.resource_id


class ConfigurationError(DomainError):
    pass
