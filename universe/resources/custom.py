"""
Generic resource handler shared by every registered resource type.

There is no per-type behaviour: the handler only knows the resource type
name and the provider configuration, and forwards every lifecycle call to
the configured executor.
"""

from collections.abc import Mapping
from typing import Any

import pulumi
from pulumi.dynamic import (
    CreateResult,
    ReadResult,
    Resource,
    ResourceProvider,
    UpdateResult,
)

from universe.config.provider import ConfigurationSnapshot
from universe.execution.executor import (
    ExecutorError,
    ScriptExecutor,
    resource_type_env_var,
)

STATE_KEY = "state"
"""Output holding the last JSON object returned by the executor"""


def _inputs(props: Mapping[str, Any] | None) -> dict[str, Any]:
    # Pulumi adds bookkeeping keys such as __provider
    return {
        key: value
        for key, value in (props or {}).items()
        if not key.startswith("__") and key != STATE_KEY
    }


class ExecutorResourceProvider(ResourceProvider):
    """
    Pulumi dynamic provider delegating CRUD to an external executor.

    Outputs are the resource inputs plus ``state``, the object the
    executor printed for the last operation.

    Example:
        handler = ExecutorResourceProvider(
            provider_name="universe",
            resource_type="universe_file",
            configuration=snapshot,
        )
        result = handler.create({"path": "/tmp/demo"})
        result.id
    """

    def __init__(
        self,
        provider_name: str,
        resource_type: str,
        configuration: ConfigurationSnapshot,
    ):
        super().__init__()
        self.provider_name = provider_name
        self.resource_type = resource_type
        self.configuration = configuration

    @property
    def id_key(self) -> str:
        return self.configuration.id_key

    def executor(self) -> ScriptExecutor:
        """Build the executor for this resource type."""
        environment = dict(self.configuration.environment)
        environment[resource_type_env_var(self.provider_name)] = self.resource_type
        return ScriptExecutor(
            executor=self.configuration.executor,
            script=self.configuration.script,
            environment=environment,
        )

    def _run(self, operation: str, payload: dict[str, Any]) -> dict[str, Any]:
        return self.executor().run(operation, payload)

    def create(self, props: Any) -> CreateResult:
        inputs = _inputs(props)
        state = self._run("create", inputs)
        resource_id = state.get(self.id_key)
        if resource_id is None or resource_id == "":
            raise ExecutorError(
                f"Executor did not return '{self.id_key}' when creating {self.resource_type}"
            )
        return CreateResult(str(resource_id), {**inputs, STATE_KEY: state})

    def read(self, id: str, props: Any) -> ReadResult:
        inputs = _inputs(props)
        state = self._run("read", {**inputs, self.id_key: id})
        resource_id = state.get(self.id_key, id)
        return ReadResult(str(resource_id), {**inputs, STATE_KEY: state})

    def update(self, id: str, olds: Any, news: Any) -> UpdateResult:
        inputs = _inputs(news)
        state = self._run("update", {**inputs, self.id_key: id})
        return UpdateResult({**inputs, STATE_KEY: state})

    def delete(self, id: str, props: Any) -> None:
        self._run("delete", {**_inputs(props), self.id_key: id})

    def __repr__(self) -> str:
        return f"ExecutorResourceProvider(resource_type='{self.resource_type}')"


ResourceTemplate = type[ExecutorResourceProvider]
"""What every resource type identifier is bound to"""


class CustomResource(Resource):
    """
    A resource whose lifecycle is implemented by the executor.

    Example:
        resource = CustomResource(handler, "demo", {"path": "/tmp/demo"})
        pulumi.export("demo_state", resource.state)
    """

    state: pulumi.Output[dict]

    def __init__(
        self,
        handler: ExecutorResourceProvider,
        name: str,
        props: Mapping[str, Any] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ):
        self.resource_type = handler.resource_type
        super().__init__(handler, name, {**_inputs(props), STATE_KEY: None}, opts)
