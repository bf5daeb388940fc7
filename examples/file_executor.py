"""
Example executor script: keeps each resource as a JSON file.

Run by universe as ``python3 file_executor.py <operation>`` with the
resource properties as JSON on stdin. Resources live in the directory
named by STATE_DIR (from the provider's ``environment`` block).

Provider configuration:
    executor: python3
    script: examples/file_executor.py
    environment:
      STATE_DIR: /tmp/universe-state
"""

import json
import os
import sys
import uuid
from pathlib import Path


def main(operation: str) -> int:
    state_dir = Path(os.environ.get("STATE_DIR", ".universe-state"))
    state_dir.mkdir(parents=True, exist_ok=True)
    resource_type = os.environ.get("TERRAFORM_UNIVERSE_RESOURCETYPE", "universe")
    props = json.load(sys.stdin)

    if operation == "create":
        resource_id = props.get("id") or uuid.uuid4().hex
        record = {**props, "id": resource_id, "resource_type": resource_type}
        (state_dir / f"{resource_id}.json").write_text(json.dumps(record))
        print(json.dumps(record))
        return 0

    path = state_dir / f"{props['id']}.json"

    if operation == "read":
        if path.exists():
            print(path.read_text())
        return 0

    if operation == "update":
        if not path.exists():
            print(f"resource {props['id']} does not exist", file=sys.stderr)
            return 1
        record = {**json.loads(path.read_text()), **props}
        path.write_text(json.dumps(record))
        print(json.dumps(record))
        return 0

    if operation == "delete":
        path.unlink(missing_ok=True)
        return 0

    print(f"unknown operation: {operation}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv[1]))
