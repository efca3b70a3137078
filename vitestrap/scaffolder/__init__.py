"""vitestrap scaffolder -- writes the Tailwind setup into a Vite project.

Quick usage::

    from vitestrap.scaffolder import ProjectFiles

    written = await ProjectFiles().write_all("my-app", {"project_name": "my-app"})
"""

from vitestrap.scaffolder.generator import TEMPLATE_FILES, ProjectFiles, TemplateFile
from vitestrap.scaffolder.templates import TemplateRenderer

__all__ = [
    "TEMPLATE_FILES",
    "ProjectFiles",
    "TemplateFile",
    "TemplateRenderer",
]
