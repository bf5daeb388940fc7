"""
The universe Provider.

Composes identity resolution, the resource type registry and
configuration normalization into the object a Pulumi program works with.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pulumi

from universe.config.provider import (
    ConfigurationError,
    ConfigurationSnapshot,
    ProviderSchema,
    normalize_provider_config,
)
from universe.config.values import MappingReader, SchemaBackedReader
from universe.errors import UniverseError
from universe.identity import resolve_provider_name
from universe.registry import build_resource_map, qualify_resource_type
from universe.resources.custom import (
    CustomResource,
    ExecutorResourceProvider,
    ResourceTemplate,
)

logger = logging.getLogger(__name__)


class ProviderNotConfiguredError(UniverseError):
    """Raised when a resource is requested before a successful configure()."""
    pass


class UnknownResourceTypeError(UniverseError):
    """Raised for a resource type the provider does not expose."""
    pass


class Provider:
    """
    Generic provider whose resources are implemented by an external executor.

    The provider name and resource types are fixed at construction. The
    configuration is applied with ``configure()`` and shared, read-only,
    by every resource created afterwards.

    Example:
        from universe import Provider

        # TERRAFORM_UNIVERSE_RESOURCETYPES="file bucket"
        provider = Provider()
        provider.configure({
            "executor": "python3",
            "script": "scripts/job.py",
            "environment": {"API_URL": "https://example.com"},
        })

        provider.resource("file", "notes", {"path": "/tmp/notes.txt"})
    """

    def __init__(
        self,
        binary_path: str | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize provider.

        Args:
            binary_path: Process invocation path, defaults to ``sys.argv[0]``
            environ: Environment lookup, defaults to ``os.environ``
        """
        self.name = resolve_provider_name(binary_path, environ)
        logger.info("universe provider name is: %s", self.name)

        self._resource_map: dict[str, ResourceTemplate] = build_resource_map(
            self.name, environ
        )
        self._configuration: ConfigurationSnapshot | None = None

    @property
    def resource_types(self) -> tuple[str, ...]:
        """Resource type names in sorted order."""
        return tuple(self._resource_map)

    @property
    def configured(self) -> bool:
        return self._configuration is not None

    @property
    def configuration(self) -> ConfigurationSnapshot:
        """
        The current configuration snapshot.

        Raises:
            ProviderNotConfiguredError: If configure() has not succeeded
        """
        if self._configuration is None:
            raise ProviderNotConfiguredError(
                f"Provider '{self.name}' is not configured. Call configure() first."
            )
        return self._configuration

    def configure(
        self, config: SchemaBackedReader | Mapping[str, Any]
    ) -> ConfigurationSnapshot:
        """
        Apply a provider configuration block.

        Args:
            config: A schema-backed reader, or a plain mapping

        Returns:
            The new configuration snapshot

        Raises:
            ConfigurationError: If the block is invalid. The provider is
                left unconfigured.
        """
        reader = MappingReader(config) if isinstance(config, Mapping) else config
        try:
            snapshot = normalize_provider_config(reader)
        except ConfigurationError:
            self._configuration = None
            raise
        self._configuration = snapshot
        return snapshot

    def schema(self) -> dict[str, Any]:
        """JSON schema of the provider configuration block."""
        return ProviderSchema.model_json_schema()

    def resolve_resource_type(self, resource_type: str) -> str:
        """
        Map a bare or qualified type name to a registered one.

        Raises:
            UnknownResourceTypeError: If the type is not registered
        """
        if resource_type in self._resource_map:
            return resource_type
        qualified = qualify_resource_type(self.name, resource_type)
        if qualified in self._resource_map:
            return qualified
        raise UnknownResourceTypeError(
            f"Provider '{self.name}' has no resource type '{resource_type}'. "
            f"Available: {', '.join(self.resource_types)}"
        )

    def handler(self, resource_type: str) -> ExecutorResourceProvider:
        """
        Bind the generic handler to a resource type and the current configuration.

        Raises:
            UnknownResourceTypeError: If the type is not registered
            ProviderNotConfiguredError: If configure() has not succeeded
        """
        resolved = self.resolve_resource_type(resource_type)
        template = self._resource_map[resolved]
        return template(
            provider_name=self.name,
            resource_type=resolved,
            configuration=self.configuration,
        )

    def resource(
        self,
        resource_type: str,
        name: str,
        props: Mapping[str, Any] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> CustomResource:
        """
        Declare a resource of one of this provider's types.

        Args:
            resource_type: Registered type, bare (``file``) or qualified
                (``universe_file``)
            name: Pulumi resource name
            props: Resource inputs passed to the executor
            opts: Pulumi resource options

        Returns:
            The Pulumi resource
        """
        return CustomResource(self.handler(resource_type), name, props, opts)

    def __repr__(self) -> str:
        return f"Provider(name='{self.name}', resource_types={list(self.resource_types)})"
