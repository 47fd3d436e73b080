#!/usr/bin/env python3
"""Example script listing projects with their ancestry and IAM owners.

Usage:
    python example_list_projects.py [FILTER]

Note: This requires the Cloud Resource Manager API and Application Default
Credentials (``gcloud auth application-default login``).
"""

import sys

from pdum.resource import HttpError, Resource


def main():
    """Print every active project with its parent chain and owners."""
    resource = Resource()
    options = {"filter": sys.argv[1]} if len(sys.argv) > 1 else {}

    for project in resource.iter_projects(options):
        if project.metadata.get("lifecycleState") != "ACTIVE":
            continue

        print(f"\n{'='*70}")
        print(f"{project.id} ({project.metadata.get('name', '')})")
        print('='*70)

        ancestry = project.get_ancestry()
        chain = " -> ".join(f"{a['resourceId']['type']}/{a['resourceId']['id']}" for a in ancestry["ancestor"])
        print(f"  Ancestry: {chain}")

        try:
            policy = project.get_iam_policy({"requestedPolicyVersion": 3})
        except HttpError as e:
            print(f"  ⚠️  IAM policy unavailable: {e.reason}")
            continue

        for binding in policy.get("bindings", []):
            if binding["role"] == "roles/owner":
                print(f"  Owners: {', '.join(binding['members'])}")


if __name__ == "__main__":
    main()
