"""Pydantic models for records handled by the demo."""

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """Subset of the GitHub ``GET /users/{username}`` response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    login: str
    id: int
    name: str | None = None
    public_repos: int = Field(default=0, ge=0)
    html_url: str | None = None


class Dog(BaseModel):
    """A dog record from the demo's lookup list."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(ge=0)
    breed: str
