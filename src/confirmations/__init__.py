"""Event-registration confirmation emails: validation, dispatch and feedback."""

__version__ = "0.1.0"
