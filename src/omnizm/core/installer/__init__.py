from omnizm.core.installer.abc import DependencyInstaller
from omnizm.core.installer.real import RealDependencyInstaller

__all__ = [
    "DependencyInstaller",
    "RealDependencyInstaller",
]
