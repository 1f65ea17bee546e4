"""
Package build order resolution.

Packages declare the packages they depend on by file identifier. The resolver
produces one linear order in which every dependency is built before the
packages that declare it. Packages without dependencies keep their position
in declaration order, so the result is stable for a given project.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from ..config.project_model import Package
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class DependencyResolver:
    """
    Computes the build order of a set of packages.

    Depth-first traversal over the declared dependencies. A package is
    appended to the order only after all of its dependencies. Two sets are
    kept per resolve() call: packages already ordered, and packages on the
    current traversal path (a revisit of the latter is a cycle).

    Example usage:
        resolver = DependencyResolver(project.packages)
        for package in resolver.resolve():
            print(package.file)
    """

    def __init__(self, packages: Sequence[Package]):
        """
        Initialize resolver.

        Args:
            packages: All packages of the project, in declaration order
        """
        self.packages = list(packages)

    def resolve(self) -> List[Package]:
        """
        Resolve the build order.

        Returns:
            Every package exactly once, dependencies first

        Raises:
            ConfigurationError: On duplicate file identifiers, unknown
                dependency references or dependency cycles
        """
        by_file = self._index_packages()
        order: List[Package] = []
        resolved: Set[str] = set()
        visiting: Set[str] = set()

        def visit(package: Package) -> None:
            if package.file in resolved:
                return
            if package.file in visiting:
                raise ConfigurationError(
                    f"Circular dependency detected for '{package.file}'.",
                    file=package.file
                )

            visiting.add(package.file)
            for dependency_file in package.dependencies:
                dependency: Optional[Package] = by_file.get(dependency_file)
                if dependency is None:
                    raise ConfigurationError(
                        f"Unable to resolve dependency '{dependency_file}' for '{package.file}'.",
                        file=package.file,
                        dependency=dependency_file
                    )
                visit(dependency)
            visiting.discard(package.file)

            order.append(package)
            resolved.add(package.file)

        for package in self.packages:
            visit(package)

        logger.debug("Resolved build order: %s", ", ".join(p.file for p in order))
        return order

    def _index_packages(self) -> Dict[str, Package]:
        by_file: Dict[str, Package] = {}
        for package in self.packages:
            if package.file in by_file:
                raise ConfigurationError(
                    f"Duplicate package file '{package.file}'.",
                    file=package.file
                )
            by_file[package.file] = package
        return by_file


def resolve_build_order(packages: Sequence[Package]) -> List[Package]:
    """Resolve the build order of packages. See DependencyResolver."""
    return DependencyResolver(packages).resolve()
