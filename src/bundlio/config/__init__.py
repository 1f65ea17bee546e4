"""Project model and project file parsing for Bundlio."""

from .project_loader import ProjectLoader, load_project
from .project_model import Include, Package, Project, Resource

__all__ = [
    "Include",
    "Package",
    "Project",
    "Resource",
    "ProjectLoader",
    "load_project",
]
