"""Generus admin package.

Organized by feature modules (access, users, students, meetings, classes)
with a thin Flask controller layer over pure decision functions and
read-only repository adapters.

Besides what the HTTP routes use, a few helpers are public API for list
pages that build their own queries:

- `meetings.model.MeetingOrgChain.from_joined_row` for nested join results
- `meetings.model.MeetingSummary.from_row` and `classes.model.ClassInfo.from_row`
- `meetings.visibility.filter_meetings_for_user`
- `access.policy.filter_records` for rows fetched without a data filter
"""
