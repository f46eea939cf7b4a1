"""Common literal values used across pagetree.

These constants keep default paths centralized so the CLI, the configuration
loader, and tests can import the same values without drifting.

Examples
--------
>>> from pagetree import _constants
>>> _constants.DEFAULT_CONFIG_PATH.as_posix()
'config/tree.yaml'
>>> _constants.DEFAULT_NAVIGATION_OUTPUT.name
'navigation.html'
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config/tree.yaml")
DEFAULT_NAVIGATION_OUTPUT = Path("public/navigation.html")
ENV_PREFIX = "PAGES_"
