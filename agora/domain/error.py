"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed or inconsistent input)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials are missing, invalid or expired."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to modify this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a unique value (name, email, ...) is already taken."""

    pass


class ContentRejectedError(DomainError):
    """Raised when the moderation gate denies a piece of text."""

    def __init__(self, scores: dict[str, float] | None):
        self.scores = scores
        super().__init__("Comment rejected due to toxic content")


class ModerationUnavailableError(DomainError):
    """Raised when the toxicity scorer cannot produce a verdict."""

    pass
