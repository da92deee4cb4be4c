"""LDSI error types.

The scoring engine itself never raises; these cover the audit trail.
"""


class LdsiError(Exception):
    """Base error for all ldsi failures."""


class LdsiAuditError(LdsiError):
    """Audit file missing, unreadable or malformed."""


class LdsiChecksumError(LdsiAuditError):
    """Response hash recorded in an audit entry does not match its text."""


class LdsiVersionError(LdsiAuditError):
    """Audit archive format version mismatch."""
