"""Reusable page regions (header, footer)."""

from .footer_component import FooterComponent, FooterSelectors
from .header_component import HeaderComponent, HeaderSelectors

__all__ = [
    "FooterComponent",
    "FooterSelectors",
    "HeaderComponent",
    "HeaderSelectors",
]
