"""Print registry system information and list its groups."""

from __future__ import annotations

from ..registry.client import RegistryClient
from ..registry.config import RegistrySettings
from .runner import run_example


def steps(client: RegistryClient, settings: RegistrySettings) -> None:
    print(" Fetching system information...")
    info = client.get_system_info()
    print(f". Name: {info.name}")
    print(f". Description: {info.description}")
    print(f". Version: {info.version}")
    print(f". Built On: {info.built_on}")

    print("\n Fetching groups...")
    groups = client.list_groups()
    print(f". Found {len(groups)} group(s)")
    if not groups:
        print("  (No groups found)")
        return
    print("\nGroups:")
    for index, group in enumerate(groups, start=1):
        print(f"  {index}. {group.group_id}")
        if group.description:
            print(f"     Description: {group.description}")


def main() -> int:
    return run_example("Basic Example", steps, show_coordinates=False)


if __name__ == "__main__":
    raise SystemExit(main())
