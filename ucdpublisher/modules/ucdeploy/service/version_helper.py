"""Create component versions by pushing local files or triggering a pull."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ucdpublisher.modules.ucdeploy.client import (
    ApplicationApi,
    ComponentApi,
    PropertyApi,
    VersionApi,
)
from ucdpublisher.modules.ucdeploy.domain import (
    Pull,
    Push,
    VersionBlock,
    VersionResult,
)
from ucdpublisher.modules.ucdeploy.domain.constants import (
    MAX_VERSION_NAME_LENGTH,
    VERSION_ID_ENV_SUFFIX,
)
from ucdpublisher.modules.ucdeploy.repositories import GlobalEnvRepository
from ucdpublisher.modules.ucdeploy.util import EnvVars, env_key, map_properties, split_files
from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdAbortException,
    UcdValidationException,
)

from .component_helper import ComponentHelper
from .properties import PropertyReconciler
from .publisher import ArtifactPublisher, resolve_charset
from .pull_trigger import PullTrigger

log = logging.getLogger(__name__)


class VersionHelper:
    """Top-level version workflow.

    Steps run in order and the first failure aborts the run with a
    ``UcdAbortException``: optional component creation, optional tag, then
    the Push or Pull delivery. Push additionally records the new version id
    in the global environment store (a failure there is only a warning),
    reconciles version properties and attaches the result link.

    Nothing is rolled back. When property reconciliation or the link fails
    after a Push upload, the version stays on the server and the run is
    still reported as failed.
    """

    def __init__(
        self,
        app_client: ApplicationApi,
        component_client: ComponentApi,
        property_client: PropertyApi,
        version_client: VersionApi,
        env_vars: Optional[EnvVars] = None,
        env_store: Optional[GlobalEnvRepository] = None,
        *,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.app_client = app_client
        self.component_client = component_client
        self.property_client = property_client
        self.version_client = version_client
        self.env_vars = env_vars if env_vars is not None else EnvVars()
        self.env_store = env_store
        self.status_callback = status_callback
        self.publisher = ArtifactPublisher(version_client)
        self.pull_trigger = PullTrigger(component_client)
        self.reconciler = PropertyReconciler(
            component_client, property_client, version_client, status_callback=status_callback
        )

    def create_version(self, version_block: VersionBlock, link_name: str, link_url: str) -> VersionResult:
        component_name = self.env_vars.expand(version_block.component_name).strip()
        component_tag = self.env_vars.expand(version_block.tag).strip()

        if not component_name:
            raise UcdValidationException("Component Name is a required property.")

        delivery = version_block.delivery
        if not isinstance(delivery, (Push, Pull)):
            log.info("Invalid Delivery Type: %s", delivery.delivery_type)
            raise UcdValidationException(f"Invalid Delivery Type: {delivery.delivery_type}")

        result = VersionResult(component_name=component_name)
        component_helper = ComponentHelper(
            self.app_client, self.component_client, self.env_vars, status_callback=self.status_callback
        )

        if version_block.create_component_checked:
            log.info("[UrbanCode Deploy] create component starts...")
            component_helper.create_component(component_name, version_block.create_component, delivery)
            log.info("[UrbanCode Deploy] create component ends...")

        if component_tag:
            log.info("[UrbanCode Deploy] tag component starts...")
            component_helper.add_tag(component_name, component_tag)
            log.info("[UrbanCode Deploy] tag component ends...")

        if isinstance(delivery, Push):
            self._push_version(result, delivery, link_name, link_url)
        else:
            self._pull_version(result, delivery)
        return result

    def upload_version_files(
        self,
        base_dir: str,
        component: str,
        version: str,
        include_patterns: str,
        exclude_patterns: str,
    ) -> int:
        """Add files to an existing version; returns the number uploaded."""
        files = self.publisher.add_files(
            component,
            version,
            base_dir,
            split_files(include_patterns),
            split_files(exclude_patterns),
        )
        self._notify(f"Uploaded {len(files)} files to version '{version}' on component '{component}'")
        return len(files)

    def _push_version(self, result: VersionResult, push: Push, link_name: str, link_url: str) -> None:
        component_name = result.component_name
        # length is checked on the expanded name as given, whitespace included
        version = self.env_vars.expand(push.push_version)
        result.version_name = version

        log.info("[UrbanCode Deploy] create version and upload files starts...")
        self._notify(
            f"Creating new component version and Uploading files to version '{version}' on component '{component_name}'"
        )
        self.validate_version_name(version)

        base_dir = self.env_vars.expand(push.base_dir)
        self.publisher.validate_base_dir(base_dir)
        includes = split_files(self.env_vars.expand(push.file_include_patterns))
        excludes = split_files(self.env_vars.expand(push.file_exclude_patterns))
        extensions = split_files(self.env_vars.expand(push.extensions))

        charset_name = self.env_vars.expand(push.charset).strip()
        if charset_name:
            self._notify(f"Charset is provided... {charset_name}")
        charset = resolve_charset(charset_name)
        if charset_name:
            self._notify(f"Charset Display Name: {charset}")

        properties = map_properties(self.env_vars.expand(push.push_properties))
        description = self.env_vars.expand(push.push_description)

        version_id = self.publisher.publish(
            component_name,
            version,
            description,
            base_dir,
            includes,
            excludes,
            extensions,
            charset,
            on_warning=lambda message: self._warn(result, message),
        )
        result.version_id = version_id
        self._notify(f"Successfully created component version with UUID '{version_id}' and uploaded files.")

        self._record_version_id(result, component_name + VERSION_ID_ENV_SUFFIX, version_id)
        log.info("[UrbanCode Deploy] create version and upload files ends...")

        self._notify(f"Setting properties for version '{version}' on component '{component_name}'")
        log.info("[UrbanCode Deploy] set version properties starts...")
        self.reconciler.reconcile(component_name, version, properties)
        log.info("[UrbanCode Deploy] set version properties ends...")

        link_name = self.env_vars.expand(link_name)
        link_url = self.env_vars.expand(link_url)
        self._notify(f"Creating component version link '{link_name}' to URL '{link_url}'")
        try:
            self.component_client.add_component_version_link(component_name, version, link_name, link_url)
        except UcdAbortException as exc:
            log.info("[UrbanCode Deploy] add link failed...")
            raise type(exc)(f"Failed to add a version link: {exc}") from exc

    def _pull_version(self, result: VersionResult, pull: Pull) -> None:
        properties = map_properties(self.env_vars.expand(pull.pull_properties))
        self._notify(f"Using runtime properties {properties}")
        log.info("[UrbanCode Deploy] import version starts...")
        self.pull_trigger.trigger(result.component_name, properties)
        log.info("[UrbanCode Deploy] import version ends...")

    @staticmethod
    def validate_version_name(version: Optional[str]) -> None:
        length = len(version or "")
        if length < 1 or length > MAX_VERSION_NAME_LENGTH:
            raise UcdValidationException(
                f"Failed to create version '{version or ''}' in UrbanCode Deploy. UrbanCode Deploy "
                f"version name length must be between 1 and {MAX_VERSION_NAME_LENGTH} characters long. "
                f"(Current length: {length})"
            )

    def _record_version_id(self, result: VersionResult, key: str, version_id: str) -> None:
        key = env_key(key)
        if self.env_store is None:
            self._warn(result, f"No global environment store configured, {key} was not recorded.")
            return
        self._notify(f"Setting environment variable {key}.")
        try:
            self.env_store.put(key, version_id)
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to store %s: %s", key, exc)
            self._warn(result, "Failed to set version ID as environment variable.")
            return
        self.env_vars[key] = version_id

    def _warn(self, result: VersionResult, message: str) -> None:
        result.add_warning(message)
        log.warning("%s", message)
        if self.status_callback:
            self.status_callback(f"[Warning] {message}")

    def _notify(self, message: str) -> None:
        log.info("%s", message)
        if self.status_callback:
            self.status_callback(message)
