"""
Infrastructure Adapters

Web framework integrations for StarCounter entities.
"""

from .fasthtml import FastHTMLDispatcher, configure_app

__all__ = ["FastHTMLDispatcher", "configure_app"]
