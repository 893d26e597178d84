"""Project audits producing Diagnostics.

Python 3.13+.
"""

from .audit import AuditReport, audit_locale, audit_source, placeholder_names

__all__ = ["AuditReport", "audit_locale", "audit_source", "placeholder_names"]
