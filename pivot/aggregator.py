"""Project-to-member pivot.

Regroups the (project, role, member) facts of a project list by member
name. Output members are ordered by name using plain code-point comparison,
independent of locale and of input order.
"""

import logging
from typing import Dict, Iterable, List

from contracts import Member, MemberRole, Project


logger = logging.getLogger(__name__)


def pivot_projects(
    projects: Iterable[Project],
    attach_roles: bool = True,
) -> List[Member]:
    """Build one Member per distinct member name.

    Roles are collected project by project in input order, then member by
    member within each project. With attach_roles=False every Member is
    built with an empty role list, matching the bare member listing some
    callers expect.

    Args:
        projects: Projects to regroup
        attach_roles: Attach (role, project) facts to each member

    Returns:
        Members sorted ascending by name
    """
    buckets: Dict[str, List[MemberRole]] = {}
    fact_count = 0
    for project in projects:
        for member in project.members:
            bucket = buckets.setdefault(member.name, [])
            if attach_roles:
                bucket.append(MemberRole(name=member.role, project=project.name))
            fact_count += 1

    members = [Member(name=name, roles=buckets[name]) for name in sorted(buckets)]
    logger.debug("Pivoted %d membership fact(s) into %d member(s)", fact_count, len(members))
    return members
