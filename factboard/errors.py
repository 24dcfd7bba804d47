"""Error taxonomy shared by the ingestion and query paths.

``ServiceError`` subclasses are surfaced to HTTP callers as a
``(category, title, text)`` notification the front-end can show as-is.
``FetchFailure`` and ``ParseFailure`` never leave the ingestion run.
"""
from enum import Enum


class ErrorCategory(str, Enum):
    IGNORE = 'ignore'
    WARNING = 'warning'
    ERROR = 'error'
    INFORMATION = 'information'
    SUCCESS = 'success'


class ServiceError(Exception):
    status_code = 500
    category = ErrorCategory.ERROR
    default_title = 'Unexpected error'
    default_text = 'The request could not be processed'

    def __init__(self, title=None, text=None):
        self.title = title or self.default_title
        self.text = text or self.default_text
        super().__init__(f"{self.title}: {self.text}")

    def to_dict(self):
        return {
            'category': self.category.value,
            'title': self.title,
            'text': self.text,
        }


class NotFoundError(ServiceError):
    status_code = 404
    category = ErrorCategory.INFORMATION
    default_title = 'No fact found'
    default_text = 'The specified fact could not be found'


class EmptyDatasetError(ServiceError):
    status_code = 404
    category = ErrorCategory.INFORMATION
    default_title = 'No facts found'
    default_text = 'There are no facts in the app yet'


class ConflictError(ServiceError):
    status_code = 409
    category = ErrorCategory.WARNING
    default_title = 'Duplicate fact'
    default_text = 'A fact with the same text already exists'


class FetchFailure(Exception):
    """Transport error, timeout or non-success status from the facts API."""


class ParseFailure(Exception):
    """Payload is not ``{"data": [string, ...]}``."""
