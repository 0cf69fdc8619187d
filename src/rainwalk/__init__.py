"""Rain Walk: how much rain does a pedestrian collect at different walking speeds?"""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("rainwalk")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
