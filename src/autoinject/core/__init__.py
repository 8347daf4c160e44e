from autoinject.core.config import (
    ConfigurationSource,
    MappingSource,
    PropertiesFileSource,
    ResourceSource,
    Settings,
    parse_properties,
)
from autoinject.core.errors import (
    AssignmentFailure,
    ConfigurationError,
    ConfigurationNotFound,
    ConfigurationReadError,
    ContractViolation,
    InjectionError,
    InstantiationFailure,
    InvalidArgument,
    UnresolvedDependency,
)
from autoinject.core.injector import Injector
from autoinject.core.marker import (
    AutoInjectable,
    Inject,
    InjectableField,
    contract_name,
    injectable_fields,
    is_contract,
    is_injectable,
)
from autoinject.core.registry import ImplementationRegistry

__all__ = [
    "Injector",
    "ImplementationRegistry",
    "AutoInjectable",
    "Inject",
    "InjectableField",
    "contract_name",
    "injectable_fields",
    "is_contract",
    "is_injectable",
    "ConfigurationSource",
    "MappingSource",
    "PropertiesFileSource",
    "ResourceSource",
    "Settings",
    "parse_properties",
    "InjectionError",
    "ConfigurationError",
    "ConfigurationNotFound",
    "ConfigurationReadError",
    "InvalidArgument",
    "ContractViolation",
    "UnresolvedDependency",
    "InstantiationFailure",
    "AssignmentFailure",
]
