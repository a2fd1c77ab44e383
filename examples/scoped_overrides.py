#!/usr/bin/env python3
"""
Demonstrate scoped overrides with a container hierarchy.

An application-wide container holds the real services; a per-test
container shadows one of them with a mock while inheriting the rest.
"""

import logging
import sys
from pathlib import Path

# Add hidi to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hidi import DependencyContainer, RequiredDependencyNotFoundError


class Repository:
    def get_data(self):
        return "data"


class DatabaseRepository(Repository):
    def get_data(self):
        return "db-data"


class MockRepository(Repository):
    def get_data(self):
        return "mock-data"


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    app = DependencyContainer(name="app")
    app.register(Repository, DatabaseRepository())
    app.register("greeting", "hello")

    test = app.extend(name="test")
    test.register(Repository, MockRepository())

    print(f"app  -> {app.require(Repository).get_data()}")
    print(f"test -> {test.require(Repository).get_data()}")
    print(f"test greeting (inherited) -> {test.require('greeting')}")
    print()

    print("=== Visible from test ===")
    for name, value in test.list_dependencies().items():
        print(f"  {name}: {value!r}")
    print()

    try:
        test.require("mailer")
    except RequiredDependencyNotFoundError as e:
        print(f"Expected miss: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
