"""
ScriptExecutor: runs the external program that implements resource CRUD.

Each operation runs ``<executor> <script> <operation>`` with a JSON
object on stdin. The program answers with a JSON object on stdout (or
nothing) and signals failure with a non-zero exit status.
"""

import json
import logging
import os
import subprocess
from collections.abc import Mapping
from typing import Any

from universe.errors import UniverseError

logger = logging.getLogger(__name__)

OPERATIONS = ("create", "read", "update", "delete")


class ExecutorError(UniverseError):
    """Raised when the executor cannot be run or reports a failure."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def resource_type_env_var(provider_name: str) -> str:
    """Name of the variable telling the executor which resource type it is serving."""
    return "TERRAFORM_" + provider_name.upper() + "_RESOURCETYPE"


class ScriptExecutor:
    """
    Invokes the configured executor for a single resource type.

    Example:
        executor = ScriptExecutor(
            executor="python3",
            script="scripts/job.py",
            environment={"API_URL": "https://example.com"},
        )
        result = executor.run("create", {"name": "demo"})
    """

    def __init__(
        self,
        executor: str | None,
        script: str | None = None,
        environment: Mapping[str, str] | None = None,
    ):
        """
        Args:
            executor: Program to run, e.g. ``python3``
            script: Path passed as the first argument to the program
            environment: Variables added to the inherited process environment
        """
        self.executor = executor
        self.script = script
        self.environment = dict(environment or {})

    def command(self, operation: str) -> list[str]:
        """Build the command line for an operation."""
        if not self.executor:
            raise ExecutorError(f"No executor configured to run '{operation}'")
        # Configuration values are not type checked; YAML may hand us ints or dates
        cmd = [str(self.executor)]
        if self.script:
            cmd.append(str(self.script))
        cmd.append(operation)
        return cmd

    def process_env(self) -> dict[str, str]:
        """Environment for the child process."""
        return {**os.environ, **self.environment}

    def run(self, operation: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """
        Run one CRUD operation.

        Args:
            operation: One of create, read, update, delete
            payload: Resource properties, sent as JSON on stdin

        Returns:
            The JSON object printed by the executor, or an empty dict when
            it printed nothing

        Raises:
            ExecutorError: If the program cannot be started, exits non-zero
                or prints something other than a JSON object
        """
        if operation not in OPERATIONS:
            raise ExecutorError(f"Unknown operation '{operation}'")

        cmd = self.command(operation)
        logger.debug("Running executor: %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                input=json.dumps(dict(payload)),
                env=self.process_env(),
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ExecutorError(f"Executor not found: {self.executor}") from e
        except subprocess.CalledProcessError as e:
            error_msg = f"Executor command failed: {' '.join(cmd)} (exit status {e.returncode})"
            if e.stderr:
                error_msg += f"\n{e.stderr}"
            raise ExecutorError(error_msg, returncode=e.returncode, stderr=e.stderr or "") from e

        if result.stderr:
            logger.debug("Executor stderr for %s: %s", operation, result.stderr.strip())

        output = result.stdout.strip()
        if not output:
            return {}
        try:
            parsed = json.loads(output)
        except json.JSONDecodeError as e:
            raise ExecutorError(f"Executor returned invalid JSON for '{operation}': {e}") from e
        if not isinstance(parsed, dict):
            raise ExecutorError(
                f"Executor must return a JSON object for '{operation}', "
                f"got {type(parsed).__name__}"
            )
        return parsed
