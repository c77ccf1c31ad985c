"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin discovery failures are warnings, never errors.
"""

from gqlnno.plugins.errors import NonNullOptionalError
from gqlnno.plugins.manager import PluginManager

__all__ = ["NonNullOptionalError", "PluginManager"]
