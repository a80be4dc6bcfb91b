"""Package metadata and naming constants."""
from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "resource-binder"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    __version__ = "0.0.0"
VERSION = __version__
