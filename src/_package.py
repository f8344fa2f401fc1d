"""Package metadata and naming constants."""

PACKAGE_NAME = "university-patterns"
PACKAGE_NAME_SHORT = "university"
__version__ = "1.0.0"  # Version for imports
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Factory, decorator, builder and singleton patterns on a student/university model"
