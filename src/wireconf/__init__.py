from wireconf._internal.dependency_graph import DependencyGraphBuilder, ServiceRegistry
from wireconf._internal.emitter import DocumentEmitter
from wireconf._internal.factory_mappings import FactoryMappingMerger
from wireconf._internal.loader import load_config_file, normalize_config
from wireconf._internal.serializer import ClassReference, ConfigSerializer
from wireconf.dumper import ConfigDumper
from wireconf.exceptions import (
    ClassNotFoundError,
    CyclicDependencyError,
    InvalidConfigurationError,
    WireconfError,
)
from wireconf.factory import (
    CONFIG_FACTORY,
    DEPENDENCIES_CONFIGURATION_KEY,
    FACTORIES_KEY,
    SERVICE_MANAGER_CONFIGURATION_KEY,
    ConfigFactory,
)

__all__ = [
    "CONFIG_FACTORY",
    "DEPENDENCIES_CONFIGURATION_KEY",
    "FACTORIES_KEY",
    "SERVICE_MANAGER_CONFIGURATION_KEY",
    "ClassNotFoundError",
    "ClassReference",
    "ConfigDumper",
    "ConfigFactory",
    "ConfigSerializer",
    "CyclicDependencyError",
    "DependencyGraphBuilder",
    "DocumentEmitter",
    "FactoryMappingMerger",
    "InvalidConfigurationError",
    "ServiceRegistry",
    "WireconfError",
    "load_config_file",
    "normalize_config",
]
