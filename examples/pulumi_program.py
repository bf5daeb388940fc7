"""
Pulumi program using universe with the example file executor.

Run from a Pulumi project directory:
    export TERRAFORM_UNIVERSE_RESOURCETYPES="file"
    pulumi up
"""

import pulumi

from universe import Provider

provider = Provider()
provider.configure(
    {
        "executor": "python3",
        "script": "examples/file_executor.py",
        "environment": {"STATE_DIR": "/tmp/universe-state"},
    }
)

notes = provider.resource("file", "notes", {"content": "hello"})

pulumi.export("notes_id", notes.id)
pulumi.export("notes_state", notes.state)
