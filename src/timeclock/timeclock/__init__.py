"""Timeclock package.

Staff status is never stored: it is derived by replaying an append-only event
log. Feature modules (events, staff, timetrack, statistics, auth) follow the
same layering: model -> repository protocol -> MySQL repository -> service ->
thin Flask controller.
"""
