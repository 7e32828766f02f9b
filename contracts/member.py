"""Member contracts produced by the pivot.

The inverse projection of the project contracts: each Member carries the
(role, project) facts contributed by every project that lists them.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Tuple


class MemberRole(BaseModel):
    """A role held by a member, together with the owning project's name."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Role name")
    project: str = Field(default="", description="Name of the project granting the role")

    @field_validator("name", "project", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Member(BaseModel):
    """A member and every role they hold across all projects."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Member name")
    roles: Tuple[MemberRole, ...] = Field(
        default=(),
        description="Roles in project order, then member order within each project",
    )

    @field_validator("name", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("roles", mode="before")
    @classmethod
    def reject_null_roles(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)) and any(r is None for r in value):
            raise ValueError("Role list must contain only non-null values.")
        return value
