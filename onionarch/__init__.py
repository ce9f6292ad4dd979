"""onionarch - checks that dependencies in a Python code base point inward."""
from onionarch._package import __version__
from onionarch.domain.architecture import OnionArchitecture

__all__ = ["OnionArchitecture", "__version__"]
