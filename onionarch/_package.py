"""Package metadata and naming constants."""

PACKAGE_NAME = "onionarch"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Onion architecture layer-dependency checker for Python source trees"
