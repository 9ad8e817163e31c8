"""
Version 1 of the API.

This subpackage bundles the endpoints of every resource.  Breaking
changes should go to a new version subpackage.
"""
