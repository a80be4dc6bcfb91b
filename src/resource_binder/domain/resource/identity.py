"""Resource identity value object."""
from pydantic import BaseModel, ConfigDict, field_validator


class ResourceIdentity(BaseModel):
    """The (type, id) pair that identifies one remote resource instance."""
    model_config = ConfigDict(frozen=True)

    resource_type: str
    id: str

    @field_validator("resource_type", "id")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    def __str__(self) -> str:
        return f"{self.resource_type}[{self.id}]"
