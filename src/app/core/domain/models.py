"""Domain models used in business logic."""
from pydantic import BaseModel, Field

NAME_MAX_LENGTH = 255


class ServiceSummary(BaseModel):
    """Reduced view of a Service as seen from a Client: identity and name only."""
    id: int
    name: str

    model_config = {"from_attributes": True, "frozen": True}


class Service(BaseModel):
    """Domain model for a Service (an offering clients subscribe to)."""
    id: int | None = Field(default=None, description="Generated on insert")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)

    model_config = {"from_attributes": True, "validate_assignment": True}

    def summary(self) -> ServiceSummary:
        if self.id is None:
            raise ValueError("Service has not been persisted yet")
        return ServiceSummary(id=self.id, name=self.name)


class Client(BaseModel):
    """
    Domain model for a Client.

    ``services`` is one-directional: a client knows the services it is associated
    with, services never carry their clients back.
    """
    id: int | None = Field(default=None, description="Generated on insert")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    services: list[ServiceSummary] = Field(default_factory=list)

    model_config = {"from_attributes": True, "validate_assignment": True}

    def rename(self, name: str | None) -> None:
        """Overwrite the name only when a non-blank value is given."""
        if name is not None and name.strip():
            self.name = name.strip()

    def change_email(self, email: str | None) -> None:
        """Overwrite the email only when a non-blank value is given."""
        if email is not None and email.strip():
            self.email = email.strip()
