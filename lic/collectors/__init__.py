"""Dependency collectors for Go projects, in fallback order."""

from lic.collectors.base import DependencyCollector, Requirement
from lic.collectors.chain import CollectorChain
from lic.collectors.godep import GodepCollector
from lic.collectors.gomod import GoModCollector
from lic.collectors.gopath import GopathCollector


def default_collectors() -> list[DependencyCollector]:
    """go.mod first, then Gopkg.lock, then the source-tree scan."""
    return [GoModCollector(), GodepCollector(), GopathCollector()]


__all__ = [
    "CollectorChain",
    "DependencyCollector",
    "GoModCollector",
    "GodepCollector",
    "GopathCollector",
    "Requirement",
    "default_collectors",
]
