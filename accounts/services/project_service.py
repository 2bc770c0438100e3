from __future__ import annotations

from dataclasses import dataclass

from accounts.core.errors import NotFoundError
from accounts.db.models import Project
from accounts.repositories.interfaces import ProjectStore


@dataclass
class ProjectService:
    project_repository: ProjectStore

    def get(self, project_id: str) -> Project:
        project = self.project_repository.get(project_id)
        if not project:
            raise NotFoundError("Project", project_id)
        return project
