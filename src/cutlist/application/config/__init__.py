"""Project file schema, loading and validation.

Public API:
    - ProjectConfiguration: Root configuration model
    - CabinetConfig: Cabinet entry model
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_settings, config_to_materials, config_to_board,
      config_to_cabinets: Resolve domain objects from a project
    - ValidationResult, ValidationError, ValidationWarning
    - validate_config: Perform full project validation

Example:
    >>> from pathlib import Path
    >>> from cutlist.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.cabinets)} cabinets")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutlist.application.config.adapter import (
    config_to_board,
    config_to_cabinet,
    config_to_cabinets,
    config_to_materials,
    config_to_settings,
)
from cutlist.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutlist.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BoardConfigSchema,
    CabinetConfig,
    CabinetOptionsConfig,
    MaterialConfig,
    MaterialsConfig,
    PlacementConfig,
    ProjectConfiguration,
    SettingsConfig,
)
from cutlist.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoardConfigSchema",
    "CabinetConfig",
    "CabinetOptionsConfig",
    "ConfigError",
    "MaterialConfig",
    "MaterialsConfig",
    "PlacementConfig",
    "ProjectConfiguration",
    "SettingsConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_board",
    "config_to_cabinet",
    "config_to_cabinets",
    "config_to_materials",
    "config_to_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
