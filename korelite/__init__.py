"""Sessions with CSRF tokens, cookie helpers, templates, HTML escaping and guarded SQL helpers."""

__version__ = "0.1.0"
__all__ = ["db", "http_session", "session", "template", "util"]