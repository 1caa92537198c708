"""
Exceptions for hunk utilities.
"""

class HunkError(Exception):
    """
    Base exception for hunk manipulation errors.
    
    Attributes:
        message -- explanation of the error
        details -- additional details about the error
    """
    
    def __init__(self, message, details=None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class HunkOrderError(HunkError):
    """Raised when hunks handed to the merger are unsorted or overlap."""
