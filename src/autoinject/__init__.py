"""
autoinject — field injection driven by a contract -> implementation table.
Mark attributes with Inject[Contract], then injector.inject(obj).
"""
from autoinject.core import (
    AssignmentFailure,
    AutoInjectable,
    ConfigurationError,
    ConfigurationNotFound,
    ConfigurationReadError,
    ConfigurationSource,
    ContractViolation,
    ImplementationRegistry,
    Inject,
    InjectableField,
    InjectionError,
    Injector,
    InstantiationFailure,
    InvalidArgument,
    MappingSource,
    PropertiesFileSource,
    ResourceSource,
    Settings,
    UnresolvedDependency,
    contract_name,
    injectable_fields,
    is_contract,
    is_injectable,
    parse_properties,
)

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
