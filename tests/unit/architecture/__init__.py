"""Architectural compliance tests package.

This package contains tests that check onionarch's own package layering
with onionarch itself.
"""
