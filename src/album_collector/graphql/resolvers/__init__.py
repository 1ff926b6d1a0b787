"""Resolver package for the GraphQL schema.

Resolvers reach the database through the ``Database`` placed in the request
context by ``create_graphql_router``; nothing here holds global state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database import Database
    from ..loaders import Loaders


def get_database(info: strawberry.Info) -> Database:
    return info.context["database"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
