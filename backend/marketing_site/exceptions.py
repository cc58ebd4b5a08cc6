class SiteError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__


class ContactValidationError(SiteError):
    """Invalid contact submission."""

    status_code = 400


class InvariantViolation(SiteError):
    """Document violates a content invariant."""

    status_code = 400


class SectionNotFound(SiteError):
    """Section not found in the current document snapshot."""

    status_code = 404


class DocumentNotFound(SiteError):
    """Document not found."""

    status_code = 404


class ConfirmationRequired(SiteError):
    """This action must be confirmed."""

    status_code = 428


class RevisionConflict(SiteError):
    """Conflict detected. The document has been modified."""

    status_code = 409


class CMSError(SiteError):
    """Content service request failed."""

    status_code = 502
