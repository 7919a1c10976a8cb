"""
Core helpers package for the carrier gateway client.

This package contains low-level infrastructure: settings, URL and header
construction, the raw HTTP requester and the status resolver.  Keeping
these helpers in a dedicated package makes it easy to swap the
requester for a test double.
"""

__all__ = []
