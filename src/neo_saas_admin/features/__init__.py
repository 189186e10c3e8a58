"""Feature modules.

- ``facades``: the stateful paginated entity facade shared by every feature
- ``pagination``: paged list queries and results
- ``saas``: tenants and editions
- ``audit_logging``: audit logs, statistics and entity changes
- ``text_templates``: template definitions and contents
"""
