"""Merge people who share e-mail addresses into single identities."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Identity:
    """A person's name and the sorted addresses that belong to them."""

    name: str
    emails: tuple


class _Groups:
    """Disjoint sets over address ids."""

    def __init__(self):
        self._parent = []

    def add(self):
        self._parent.append(len(self._parent))
        return len(self._parent) - 1

    def find(self, item):
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first, second):
        a, b = self.find(first), self.find(second)
        if a != b:
            self._parent[max(a, b)] = min(a, b)


def merge_identities(people):
    """Merge ``(name, emails)`` records that share an address.

    Each address belongs to the first person listed with it, and a merged
    identity takes the smallest name among its addresses' owners. Identities
    come ordered by number of addresses, then by name.
    """
    ids = {}
    owners = []
    addresses = []
    groups = _Groups()

    for name, emails in people:
        previous = None
        for email in emails:
            current = ids.get(email)
            if current is None:
                current = groups.add()
                ids[email] = current
                owners.append(name)
                addresses.append(email)
            if previous is not None:
                groups.union(previous, current)
            previous = current

    members = {}
    for node in range(len(addresses)):
        members.setdefault(groups.find(node), []).append(node)

    # Components in order of discovery, by their smallest address id.
    discovered = [
        Identity(
            name=min(owners[node] for node in nodes),
            emails=tuple(sorted(addresses[node] for node in nodes)),
        )
        for _, nodes in sorted(members.items())
    ]
    # Later discoveries come first among equals.
    return sorted(reversed(discovered), key=lambda item: (len(item.emails), item.name))


def parse_input(text):
    """Parse ``n`` records of a name, an address count and the addresses."""
    tokens = iter(text.split())

    def take(what):
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError(f"expected {what}") from None

    def take_int(what):
        token = take(what)
        try:
            return int(token)
        except ValueError as exc:
            raise ValueError(f"malformed {what}: {token!r}") from exc

    count = take_int("the number of people")
    if count < 0:
        raise ValueError("the number of people must not be negative")
    people = []
    for _ in range(count):
        name = take("a name")
        total = take_int("an address count")
        if total < 0:
            raise ValueError("an address count must not be negative")
        people.append((name, [take("an address") for _ in range(total)]))
    return people


def format_identities(identities):
    """Render identities as the count followed by each name, size and addresses."""
    identities = list(identities)
    lines = [f"{len(identities)}\n"]
    for identity in identities:
        lines.append(f"{identity.name} {len(identity.emails)} \n")
        lines.extend(f"{email}\n" for email in identity.emails)
    return "".join(lines)


def main(argv=None):
    """Read the records from a file and write the merged identities to another."""
    parser = argparse.ArgumentParser(prog="addresses", description=merge_identities.__doc__)
    parser.add_argument("input", nargs="?", default="adrese.in", type=Path)
    parser.add_argument("output", nargs="?", default="adrese.out", type=Path)
    args = parser.parse_args(argv)
    people = parse_input(args.input.read_text())
    args.output.write_text(format_identities(merge_identities(people)))
    return 0