"""
Installed version of the Replay SDK, as reported by replay-cli --version.
"""
import importlib.metadata

try:
    __version__ = importlib.metadata.version("replay-sdk")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.0.0+unknown"
