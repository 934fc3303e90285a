"""omnizm: copy UI components into a project and install their dependencies.

Import from submodules:
- version: __version__
- core.installation: install_components (the add pipeline)
"""

from omnizm.version import __version__ as __version__
