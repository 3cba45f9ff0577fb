"""gitie: AI-assisted git front-end."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitie")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
