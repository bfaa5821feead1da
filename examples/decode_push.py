#!/usr/bin/env python3
"""Basic usage example for ghtypes.

This example demonstrates:
1. Decoding a push webhook payload from JSON
2. Reading object IDs and timestamps from the decoded model
3. Re-encoding for a binary transport and decoding it back
"""

from __future__ import annotations

from pathlib import Path

from ghtypes import Oid, PushEvent, decode, encode


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ghtypes Push Event Example")
    print("=" * 60)
    print()

    payload = Path(__file__).with_name("push_event.json").read_text()

    # Decode the JSON payload
    print("1. Decoding push payload...")
    event = decode(PushEvent, payload)
    print(f"   Ref: {event.git_ref} (branch {event.branch})")
    print(f"   Before: {event.before}")
    print(f"   After: {event.after}")
    print(f"   Branch created: {event.is_branch_created()}")
    print(f"   Installation: {event.installation_id()}")
    print()

    # pushed_at arrives as unix seconds, updated_at as a string
    print("2. Timestamps...")
    print(f"   created_at: {event.repository.created_at}")
    print(f"   pushed_at: {event.repository.pushed_at}")
    print(f"   updated_at: {event.repository.updated_at}")
    for commit in event.commits:
        tree = "empty tree" if commit.tree_id == Oid.EMPTY_TREE else str(commit.tree_id)
        print(f"   commit {commit.id:X} at {commit.timestamp} ({tree})")
    print()

    # Binary transport carries raw 20-byte identifiers
    print("3. Binary transport round trip...")
    fields = encode(event, human_readable=False)
    assert isinstance(fields, dict)
    print(f"   after as bytes: {fields['after']!r}")
    decoded = decode(PushEvent, fields, human_readable=False)
    print(f"   Round trip equal: {decoded == event}")


if __name__ == "__main__":
    main()
