"""Sample documents shared by the tests."""

STATES = frozenset({"TODO", "IN_PROGRESS", "WAITING", "CANCELLED", "DONE", "BLOCKED"})

SAMPLE_LINES = [
    "Project notes",
    "",
    "# TODO [#A] Ship release <2025-03-01 Sat> :work:",
    "Release checklist",
    "## DONE Write changelog [2025-02-20]",
    "COMPLETED_AT: [2025-02-21]",
    "## TODO Tag the build <2025-03-01 Sat 09:00-10:00>",
    "### Sign artifacts",
    "# Personal",
    "## WAITING Dentist <2025-03-04 Tue 14:30> :health:",
    "bring forms",
]
