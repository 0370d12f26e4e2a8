"""Shared pytest fixtures for wireconf tests."""

import pytest

from wireconf._internal.dependency_graph import DependencyGraphBuilder
from wireconf._internal.factory_mappings import FactoryMappingMerger
from wireconf._internal.serializer import ConfigSerializer


@pytest.fixture()
def builder() -> DependencyGraphBuilder:
    """Builder without a registry."""
    return DependencyGraphBuilder()


@pytest.fixture()
def merger() -> FactoryMappingMerger:
    """Merger using the default service-registration key."""
    return FactoryMappingMerger()


@pytest.fixture()
def serializer() -> ConfigSerializer:
    """Serializer instance."""
    return ConfigSerializer()
