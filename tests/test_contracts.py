"""Tests for the Pydantic contracts.

Verifies that every contract can be instantiated with valid data,
that absent values are normalised and that null entries are rejected.
"""

import pytest
from pydantic import ValidationError

from contracts import (
    # Project list
    ProjectMember,
    Project,
    # Member report
    MemberRole,
    Member,
    # Pipeline
    OutputFormat,
    PipelineResult,
)


class TestProjectContracts:
    """Test project-list contracts."""

    def test_project_member(self):
        member = ProjectMember(role="Dev", name="Alice")
        assert member.role == "Dev"
        assert member.name == "Alice"

    def test_project_member_none_becomes_empty(self):
        member = ProjectMember(role=None, name=None)
        assert member.role == ""
        assert member.name == ""

    def test_project_member_defaults(self):
        assert ProjectMember() == ProjectMember(role="", name="")

    def test_project_keeps_member_order(self):
        project = Project(
            name="Alpha",
            members=[
                ProjectMember(role="Dev", name="Zed"),
                ProjectMember(role="QA", name="Amy"),
            ],
        )
        assert [m.name for m in project.members] == ["Zed", "Amy"]

    def test_project_none_name_and_members(self):
        project = Project(name=None, members=None)
        assert project.name == ""
        assert project.members == ()

    def test_project_rejects_null_member(self):
        """A member list with a null entry is an invalid argument."""
        with pytest.raises(ValidationError):
            Project(name="Alpha", members=[ProjectMember(role="Dev", name="Alice"), None])

    def test_project_is_immutable(self):
        project = Project(name="Alpha", members=[])
        with pytest.raises(ValidationError):
            project.name = "Beta"

    def test_project_equality_is_field_wise(self):
        a = Project(name="Alpha", members=[ProjectMember(role="Dev", name="Alice")])
        b = Project(name="Alpha", members=(ProjectMember(role="Dev", name="Alice"),))
        assert a == b


class TestMemberContracts:
    """Test member-report contracts."""

    def test_member_role(self):
        role = MemberRole(name="Dev", project="Alpha")
        assert role.name == "Dev"
        assert role.project == "Alpha"

    def test_member_role_none_becomes_empty(self):
        role = MemberRole(name=None, project=None)
        assert role.name == ""
        assert role.project == ""

    def test_member(self):
        member = Member(
            name="Alice",
            roles=[MemberRole(name="Dev", project="Alpha"), MemberRole(name="Lead", project="Beta")],
        )
        assert len(member.roles) == 2
        assert member.roles[1].project == "Beta"

    def test_member_none_roles(self):
        assert Member(name="Alice", roles=None).roles == ()

    def test_member_rejects_null_role(self):
        with pytest.raises(ValidationError):
            Member(name="Alice", roles=[None])

    def test_member_is_immutable(self):
        member = Member(name="Alice")
        with pytest.raises(ValidationError):
            member.roles = ()


class TestPipelineContracts:
    """Test pipeline contracts."""

    def test_output_format_values(self):
        assert OutputFormat("members") == OutputFormat.MEMBERS
        assert OutputFormat("projects") == OutputFormat.PROJECTS
        assert OutputFormat("none") == OutputFormat.NONE

    def test_pipeline_result(self):
        result = PipelineResult(emit=OutputFormat.PROJECTS, project_count=2, lines_written=7)
        assert result.member_count == 0
        assert result.lines_written == 7

    def test_pipeline_result_validation(self):
        """Counts cannot be negative."""
        with pytest.raises(ValueError):
            PipelineResult(emit=OutputFormat.NONE, project_count=-1)
