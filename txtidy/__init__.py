from txtidy._version import _detect_version
from txtidy.core.tidy import tidy

__version__ = _detect_version()

__all__ = ["__version__", "tidy"]
