"""Package version, read from the installed distribution metadata."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "mmdb-bridge"

try:
    VERSION: str = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    VERSION = "0.0.0+unknown"
