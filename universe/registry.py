"""
Resource type registry.

A provider exposes its own name as a resource type, plus any types listed
in ``TERRAFORM_<NAME>_RESOURCETYPES``. Every type name is namespaced by
the provider name and bound to the same generic resource handler.
"""

import logging
import os
from collections.abc import Mapping

from universe.resources.custom import ExecutorResourceProvider, ResourceTemplate

logger = logging.getLogger(__name__)


def resource_types_env_var(provider_name: str) -> str:
    """Name of the variable listing the resource types for a provider."""
    return "TERRAFORM_" + provider_name.upper() + "_RESOURCETYPES"


def qualify_resource_type(provider_name: str, resource_type: str) -> str:
    """
    Namespace a resource type name with the provider name.

    Example:
        >>> qualify_resource_type("widget", "foo")
        'widget_foo'
        >>> qualify_resource_type("widget", "widget_bar")
        'widget_bar'
    """
    prefix = provider_name + "_"
    if resource_type.startswith(prefix):
        return resource_type
    return prefix + resource_type


def resource_type_names(
    provider_name: str,
    environ: Mapping[str, str] | None = None,
) -> frozenset[str]:
    """
    Enumerate the resource type names a provider exposes.

    The provider name itself is always included. Names listed in the
    environment are separated by whitespace and prefixed with
    ``<provider_name>_`` unless they already carry it.

    Args:
        provider_name: Resolved provider name
        environ: Environment lookup, defaults to ``os.environ``

    Returns:
        The set of resource type names
    """
    if environ is None:
        environ = os.environ

    names = {provider_name}
    listed = environ.get(resource_types_env_var(provider_name))
    if listed is None:
        return frozenset(names)

    for token in listed.split():
        names.add(qualify_resource_type(provider_name, token))
    return frozenset(names)


def build_resource_map(
    provider_name: str,
    environ: Mapping[str, str] | None = None,
) -> dict[str, ResourceTemplate]:
    """
    Bind every resource type name to the generic resource handler.

    Args:
        provider_name: Resolved provider name
        environ: Environment lookup, defaults to ``os.environ``

    Returns:
        Mapping of resource type name to handler template, in sorted order
    """
    resource_map = {
        name: ExecutorResourceProvider
        for name in sorted(resource_type_names(provider_name, environ))
    }
    logger.info("Resource map is: %s", list(resource_map))
    for name in resource_map:
        logger.info("Provider %s has resource %s", provider_name, name)
    return resource_map
