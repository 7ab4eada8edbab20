"""sonar_sync/resources.py

Project/module traversal.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .client import ServerClient
from .queries import ResourceQuery
from .types import QUALIFIER_MODULE, QUALIFIER_PROJECT, Resource

logger = logging.getLogger(__name__)


def get_all_projects(client: ServerClient) -> List[Resource]:
    return client.find_resources(ResourceQuery.for_qualifiers(QUALIFIER_PROJECT)) or []


def get_all_modules(client: ServerClient, project_id: Optional[int]) -> List[Resource]:
    if project_id is None:
        return []
    return client.find_resources(ResourceQuery.for_children(project_id, QUALIFIER_MODULE)) or []


def list_all_projects_and_modules(client: ServerClient) -> List[Resource]:
    """Flatten projects and their modules, each project followed by its modules.

    The module query already runs at unlimited depth, so the returned modules
    are taken as-is and not queried again for children.
    """
    all_resources: List[Resource] = []
    for project in get_all_projects(client):
        all_resources.append(project)
        all_resources.extend(get_all_modules(client, project.id))

    logger.debug("Found %d projects and modules", len(all_resources))
    return all_resources
