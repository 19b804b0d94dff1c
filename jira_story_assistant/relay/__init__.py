"""
HTTP relay that attaches credentials and forwards issue creation upstream.
"""

from .app import app, create_app, run

__all__ = ['app', 'create_app', 'run']
