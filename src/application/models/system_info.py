"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by the /info use case."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    mongo_uri: str
    database_name: str
    orders_collection: str
