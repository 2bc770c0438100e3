#!/usr/bin/env python3
"""
Attach an existing user to a project or group, creating the target if needed.

Usage:
  python scripts/add_member.py --user alice --project-name "Demo"
  python scripts/add_member.py --user alice@example.com --group-id <uuid>
"""
from __future__ import annotations

import argparse
import sys

from accounts.repositories.sql_repository import (
    GroupRepository,
    ProjectRepository,
    UserRepository,
    UserToGroupRepository,
    UserToProjectRepository,
)


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a user to a project or group")
    ap.add_argument("--user", required=True, help="Username or email of the member")
    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument("--project-id", help="Existing project id")
    target.add_argument("--project-name", help="Create a new project with this name")
    target.add_argument("--group-id", help="Existing group id")
    target.add_argument("--group-name", help="Create a new group with this name")
    args = ap.parse_args()

    user = UserRepository().find_by_username_or_email((args.user or "").strip())
    if not user:
        raise SystemExit(f"User '{args.user}' does not exist")

    if args.project_id or args.project_name:
        entities, members, kind = ProjectRepository(), UserToProjectRepository(), "project"
        target_id, target_name = args.project_id, args.project_name
    else:
        entities, members, kind = GroupRepository(), UserToGroupRepository(), "group"
        target_id, target_name = args.group_id, args.group_name

    if target_id:
        entity = entities.get(target_id)
        if not entity:
            raise SystemExit(f"{kind.capitalize()} '{target_id}' does not exist")
    else:
        entity = entities.save(target_name.strip())

    members.add(user.id, entity.id)
    print(f"OK: {user.profile.username} added to {kind}")
    print(f"  {kind} id: {entity.id}")
    print(f"  {kind} name: {entity.name}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
