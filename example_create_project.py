#!/usr/bin/env python3
"""Example script creating a project and waiting for it.

Usage:
    python example_create_project.py [PROJECT_ID]

Note: This mutates GCP estate. The project id is suggested when omitted.
"""

import sys

from pdum.resource import Project, Resource


def main():
    """Create a project, wait for the operation, then show its metadata."""
    project_id = sys.argv[1] if len(sys.argv) > 1 else Project.suggest_id(prefix="example")
    resource = Resource()

    project, operation, _ = resource.create_project(project_id, {"name": "Example project"})
    print(f"Creating {project.id} via {operation.name}...")

    operation.wait(timeout=300.0)

    metadata = project.get_metadata()
    print(f"Project number: {metadata['projectNumber']}")
    print(f"State: {metadata['lifecycleState']}")


if __name__ == "__main__":
    main()
