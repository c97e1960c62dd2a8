"""Component creation and tagging."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ucdpublisher.modules.ucdeploy.client import ApplicationApi, ComponentApi
from ucdpublisher.modules.ucdeploy.domain import CreateComponentBlock, DeliveryBlock, DeliveryType
from ucdpublisher.modules.ucdeploy.util import EnvVars
from ucdpublisher.modules.ucdeploy.util.exceptions import UcdAbortException


class ComponentHelper:
    def __init__(
        self,
        app_client: ApplicationApi,
        component_client: ComponentApi,
        env_vars: Optional[EnvVars] = None,
        *,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.app_client = app_client
        self.component_client = component_client
        self.env_vars = env_vars or EnvVars()
        self.status_callback = status_callback
        self.log = logging.getLogger(self.__class__.__name__)

    def create_component(
        self,
        component_name: str,
        create_block: CreateComponentBlock,
        delivery: DeliveryBlock,
    ) -> bool:
        """Create the component unless it exists; returns True when created."""
        template = self.env_vars.expand(create_block.component_template).strip()
        application = self.env_vars.expand(create_block.component_application).strip()

        try:
            exists = self.component_client.component_exists(component_name)
            if exists:
                self._notify(f"Component '{component_name}' already exists, skipping creation")
            else:
                self._notify(f"Creating component '{component_name}'")
                self.component_client.create_component(
                    component_name,
                    description="",
                    source_config_plugin="",
                    import_automatically=False,
                    use_vfs=True,
                    template_name=template,
                    default_version_type="FULL",
                )
                self._notify(f"Successfully created component '{component_name}'")

            if application:
                self._notify(f"Adding component '{component_name}' to application '{application}'")
                self.app_client.add_component_to_application(application, component_name)
        except UcdAbortException as exc:
            raise type(exc)(f"Failed to create component '{component_name}': {exc}") from exc

        if delivery.delivery_type == DeliveryType.PULL.value and not exists:
            self.log.warning(
                "Component %s was created without a source config; configure one before importing versions",
                component_name,
            )
        return not exists

    def add_tag(self, component_name: str, tag: str) -> None:
        self._notify(f"Adding tag '{tag}' to component '{component_name}'")
        try:
            self.component_client.add_tag_to_component(component_name, tag)
        except UcdAbortException as exc:
            raise type(exc)(f"Failed to add tag '{tag}' to component '{component_name}': {exc}") from exc

    def _notify(self, message: str) -> None:
        self.log.info("%s", message)
        if self.status_callback:
            self.status_callback(message)
