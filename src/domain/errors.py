"""Domain error types raised by services and infrastructure."""


class DatabaseError(Exception):
    """Raised when a Postgres statement fails."""


class OrganizationNotFoundError(Exception):
    """Raised when an organization id does not resolve to a record."""

    def __init__(self, organization_id: str):
        self.organization_id = organization_id
        super().__init__(f"Organization with id {organization_id} not found")


class UserAlreadyExistsError(Exception):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__("User already exists")


class InvalidCredentialsError(Exception):
    """Raised when login email or password does not match."""

    def __init__(self):
        super().__init__("Invalid email or password")


class InvalidTokenError(Exception):
    """Raised when an access token cannot be verified."""


class LlmExtractionError(Exception):
    """Raised when the LLM call fails or returns unusable content."""
