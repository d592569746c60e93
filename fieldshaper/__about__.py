"""Central place for package metadata."""

# NOTE: We use __title__ instead of simply __name__ since the latter would
#       interfere with a global variable __name__ denoting object's name.
__title__ = "fieldshaper"
__summary__ = "Dynamic field projection (data shaping) for Django REST APIs"
__url__ = "https://github.com/genialis/fieldshaper"

__version__ = "1.0.0"

__author__ = "Genialis, Inc."
__email__ = "dev-team@genialis.com"

__license__ = "Apache License (2.0)"
__copyright__ = "2024, " + __author__

__all__ = (
    "__title__",
    "__summary__",
    "__url__",
    "__version__",
    "__author__",
    "__email__",
    "__license__",
    "__copyright__",
)
