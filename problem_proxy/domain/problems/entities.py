"""
Domain entities for the problems bounded context.

Problem and work-note records are owned by the upstream platform and
are passed through opaquely as JSON objects. Only the table names and
field tags the use cases rely on are defined here.
No framework imports and no IO operations.
"""

from typing import Any

Record = dict[str, Any]
"""An upstream record, passed through without interpretation."""

PROBLEM_TABLE = "problem"
JOURNAL_TABLE = "sys_journal_field"
WORK_NOTES_ELEMENT = "work_notes"

# Fields a new problem may be created with; everything else is dropped.
CREATE_FIELDS = ("short_description", "description", "priority")


def work_notes_filter(problem_id: str) -> dict[str, str]:
    """Return the journal query selecting work notes of a problem.

    Args:
        problem_id: Identifier (sys_id) of the problem.

    Returns:
        Query parameters for the ``sys_journal_field`` table.
    """
    return {
        "element_id": problem_id,
        "name": PROBLEM_TABLE,
        "element": WORK_NOTES_ELEMENT,
    }
