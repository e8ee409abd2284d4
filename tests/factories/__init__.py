"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, AttachmentFactory
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.project import AttachmentFactory, ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Projects
    "AttachmentFactory",
    "ProjectFactory",
]
