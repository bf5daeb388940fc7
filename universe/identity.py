"""
Provider identity resolution.

The provider name namespaces every resource type the provider exposes.
It comes from an explicit override in the environment, or from the name
of the binary the provider was started as (``terraform-provider-<name>``),
or falls back to a fixed default when run under a test harness or a
debugger where the binary name is meaningless.
"""

import os
import re
import sys
from collections.abc import Mapping

DEFAULT_PROVIDER_NAME = "universe"
"""Name used when neither the override nor the binary name applies"""

PROVIDER_NAME_ENV_VAR = "TERRAFORM_UNIVERSE_PROVIDERNAME"
"""Environment variable overriding the provider name"""

BINARY_NAME_PATTERN = re.compile(
    r"terraform-provider-(?:([^\d]+))(?:-(\d+(?:\.\d+(?:\.\d+)?)?))?(?:-pre\d*)?",
    re.ASCII,
)


def provider_name_from_binary(binary_path: str) -> str | None:
    """
    Extract the provider name from a binary path.

    Args:
        binary_path: Path the process was invoked as (e.g. ``sys.argv[0]``)

    Returns:
        The name part of ``terraform-provider-<name>[-<version>][-pre<n>]``,
        or None when the basename does not follow that pattern

    Example:
        >>> provider_name_from_binary("/plugins/terraform-provider-widget-1.2.3")
        'widget'
    """
    match = BINARY_NAME_PATTERN.fullmatch(os.path.basename(binary_path))
    if match is None:
        return None
    return match.group(1)


def resolve_provider_name(
    binary_path: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Resolve the logical provider name.

    The override variable wins whenever it is present, even when set to
    an empty string. Resolution never fails.

    Args:
        binary_path: Process invocation path, defaults to ``sys.argv[0]``
        environ: Environment lookup, defaults to ``os.environ``

    Returns:
        The provider name
    """
    if environ is None:
        environ = os.environ
    if PROVIDER_NAME_ENV_VAR in environ:
        return environ[PROVIDER_NAME_ENV_VAR]

    if binary_path is None:
        binary_path = sys.argv[0] if sys.argv else ""

    name = provider_name_from_binary(binary_path)
    if name is not None:
        return name
    return DEFAULT_PROVIDER_NAME
