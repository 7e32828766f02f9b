"""Literal delimiters of the project-list and member-report line formats.

All comparisons against these tokens are exact and ordinal.
"""

# Project list (read and written)
PROJECTS_HEADER = "<projects>"
PROJECTS_TAIL = "</projects>"

PROJECT_HEADER_START = '    <project name="'
PROJECT_HEADER_END = '">'
PROJECT_HEADER_MIN_LENGTH = len(PROJECT_HEADER_START) + len(PROJECT_HEADER_END)
PROJECT_TAIL = "    </project>"

MEMBER_START = '        <member role="'
MEMBER_NAME_START = '" name="'
MEMBER_END = '"/>'
MEMBER_MIN_LENGTH = len(MEMBER_START) + len(MEMBER_NAME_START) + len(MEMBER_END)

# Member report (written only)
MEMBERS_HEADER = "<members>"
MEMBERS_TAIL = "</members>"

MEMBER_HEADER_START = '    <member name="'
MEMBER_HEADER_END = '"/>'
MEMBER_TAIL = "    </member>"

ROLE_START = '        <role name="'
ROLE_PROJECT_START = '" project="'
ROLE_END = '"/>'
