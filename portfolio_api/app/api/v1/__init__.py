"""
Version 1 of the API.

This subpackage bundles all endpoints of the portfolio API.  The
public paths are unversioned (``/api/...``); breaking changes should
go into a new version subpackage mounted under its own prefix.
"""
