"""Ask the server to import a new version from the component's source config."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from ucdpublisher.modules.ucdeploy.client import ComponentApi
from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdResponseException,
    UcdTransportException,
)

log = logging.getLogger(__name__)


class PullTrigger:
    def __init__(self, component_client: ComponentApi) -> None:
        self.component_client = component_client

    def trigger(self, component: str, properties: Mapping[str, str]) -> Dict[str, Any]:
        log.info("Importing versions on component %s with properties %s", component, dict(properties))
        try:
            return self.component_client.import_component_versions(component, dict(properties))
        except UcdTransportException as exc:
            raise UcdTransportException(
                f"An error occurred while importing component versions on component '{component}' : {exc}"
            ) from exc
        except (UcdResponseException, TypeError, ValueError) as exc:
            raise UcdResponseException(
                f"An error occurred while creating JSON version import object : {exc}"
            ) from exc
