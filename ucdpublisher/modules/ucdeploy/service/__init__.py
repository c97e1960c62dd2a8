"""Service exports."""

from .component_helper import ComponentHelper
from .manager import OperationResult, VersionPublishService
from .properties import PropertyReconciler
from .publisher import ArtifactPublisher, resolve_charset
from .pull_trigger import PullTrigger
from .version_helper import VersionHelper

__all__ = [
    "ArtifactPublisher",
    "ComponentHelper",
    "OperationResult",
    "PropertyReconciler",
    "PullTrigger",
    "VersionHelper",
    "VersionPublishService",
    "resolve_charset",
]
