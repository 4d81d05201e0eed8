# mobileops/exceptions.py
# Error types raised by the mobile presentation layer

from __future__ import annotations


class MobileFrontendError(Exception):
    """Base class for errors raised by mobileops."""


class NotFoundInput(MobileFrontendError):
    """
    Raised when a special page is requested without a usable page name.

    Carries the localized title and description of the error page; the web
    layer maps it to a 404 response.
    """

    status_code = 404

    def __init__(self, title: str, description: str):
        super().__init__(description)
        self.title = title
        self.description = description


class InvalidFeature(MobileFrontendError, ValueError):
    """Raised when search parameters are requested for an undeclared feature."""

    def __init__(self, feature: str):
        super().__init__(f'"{feature}" isn\'t a feature that shows Wikibase descriptions.')
        self.feature = feature
