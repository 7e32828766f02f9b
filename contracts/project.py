"""Project contracts produced by the project-list reader.

A Project owns its members exclusively and keeps them in input order.
Both entities are immutable; "changing" one means building a replacement.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Tuple


class ProjectMember(BaseModel):
    """One membership fact scoped to a project."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(default="", description="Role the member holds in the project")
    name: str = Field(default="", description="Member name")

    @field_validator("role", "name", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Project(BaseModel):
    """A named project and its members, in the order they were declared."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Project name")
    members: Tuple[ProjectMember, ...] = Field(
        default=(),
        description="Members in declaration order",
    )

    @field_validator("name", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("members", mode="before")
    @classmethod
    def reject_null_members(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)) and any(m is None for m in value):
            raise ValueError("Member list must contain only non-null values.")
        return value
