import logging
from typing import List, Optional, Dict, Any, Literal, Self
import yaml
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
    ConfigDict,
)
from pydantic.alias_generators import to_camel

from .constants import DefaultConfig, IdGenerationStrategies, OperationGroups
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# --- Pydantic Models for Configuration Schema ---
class ConfigSection(BaseModel):
    """Base for configuration sections: camelCase keys, dict-style access."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",  # Allow and ignore extra fields from input dict
    )

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access for compatibility with existing code."""
        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        """Allow dict.get() style access for compatibility with existing code."""
        return getattr(self, key, default)


GenerationStrategy = Literal["auto", "uuid", "mongoid", "none"]


class IdConfig(ConfigSection):
    """Schema for the identifier settings (``id`` key)."""

    generation_strategy: GenerationStrategy = Field(
        default=DefaultConfig.ID_GENERATION_STRATEGY,
        description="How identifier values are produced.",
    )
    writable: bool = Field(
        default=DefaultConfig.ID_WRITABLE,
        description="Whether clients may set the identifier.",
    )
    name: str = Field(default=DefaultConfig.ID_NAME, min_length=1, description="Identifier property name.")
    on_class: Literal["all", "parent", "child"] = Field(
        default=DefaultConfig.ID_ON_CLASS,
        description="Which classes receive a synthesized identifier.",
    )


class PkConfig(ConfigSection):
    """Per-class identifier overrides (``types.<Class>.pk``); unset keys fall back to ``id``."""

    generation_strategy: Optional[GenerationStrategy] = None
    writable: Optional[bool] = None
    name: Optional[str] = None
    on_class: Optional[Literal["all", "parent", "child"]] = None


class PropertyTypeConfig(ConfigSection):
    relation_table_name: Optional[str] = Field(
        default=None, description="Join table name for to-many relations."
    )


class DoctrineTypeConfig(ConfigSection):
    attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Declarations replacing the generated persistence-mapping class declarations.",
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class TypeConfig(ConfigSection):
    """Schema for a single entry of the ``types`` dict."""

    doctrine: DoctrineTypeConfig = Field(default_factory=DoctrineTypeConfig)
    pk: Optional[PkConfig] = None
    properties: Dict[str, PropertyTypeConfig] = Field(default_factory=dict)


class DoctrineConfig(ConfigSection):
    use_collection: bool = Field(
        default=DefaultConfig.USE_COLLECTION,
        description="Initialize collection-valued properties in a generated constructor.",
    )
    inheritance_attributes: Dict[str, Dict[Any, Any]] = Field(
        default_factory=dict,
        description="Declarations used for abstract classes instead of a mapped superclass.",
    )


class OperationsConfig(BaseModel):
    """
    Operations of an API resource.

    Only the ``item`` and ``collection`` groups are recognized; each maps a
    method name to its options.
    """

    item: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    collection: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("item", "collection", mode="before")
    @classmethod
    def normalize_group(cls, v: Any) -> Any:
        """A bare group or method (``get:`` in YAML) means no options."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {method: {} if options is None else options for method, options in v.items()}
        return v


class GeneratorConfig(ConfigSection):
    """Pydantic schema defining the expected structure and types for the configuration."""

    types: Dict[str, TypeConfig] = Field(
        default_factory=dict,
        description="Per-class settings keyed by class name.",
    )
    id: IdConfig = Field(default_factory=IdConfig)
    doctrine: DoctrineConfig = Field(default_factory=DoctrineConfig)
    accessor_methods: bool = Field(
        default=DefaultConfig.ACCESSOR_METHODS,
        description="Generate getters, setters, adders and removers.",
    )
    fluent_mutator_methods: bool = Field(
        default=DefaultConfig.FLUENT_MUTATOR_METHODS,
        description="Mutators return the instance instead of None.",
    )
    field_visibility: Literal["public", "protected", "private"] = Field(
        default=DefaultConfig.FIELD_VISIBILITY,
        description="Visibility of generated fields.",
    )
    header: Optional[str] = Field(
        default=None, description="Module docstring of generated files."
    )
    attribute_generators: List[str] = Field(
        default_factory=lambda: list(DefaultConfig.ATTRIBUTE_GENERATORS),
        description="Ordered attribute generator names.",
    )

    @field_validator("types", mode="before")
    @classmethod
    def none_types_as_empty(cls, v: Any) -> Any:
        """A class listed without settings (``Person:`` in YAML) gets defaults."""
        if isinstance(v, dict):
            return {name: {} if settings is None else settings for name, settings in v.items()}
        return v

    @field_validator("attribute_generators")
    @classmethod
    def check_generator_names(cls, v: List[str]) -> List[str]:
        """Ensure generator names are non-empty strings."""
        processed_list = []
        for index, item in enumerate(v):
            stripped_item = item.strip()
            if not stripped_item:
                raise ValueError(
                    f"Item at index {index} cannot be empty or just whitespace."
                )
            processed_list.append(stripped_item)
        return processed_list

    @model_validator(mode="after")
    def check_writable_id(self) -> Self:
        """Perform cross-field validation checks."""
        if self.id.generation_strategy == IdGenerationStrategies.NONE and not self.id.writable:
            logger.warning(
                "'id.generationStrategy' is 'none' but 'id.writable' is False. "
                "Identifiers will be treated as writable since nothing generates them."
            )
        return self

    # --- Lookups used by the generators and mutators ---

    def id_config_for(self, class_name: str) -> IdConfig:
        """
        Identifier settings of a class: ``id`` merged key by key with
        ``types.<class_name>.pk``, the class value winning.
        """
        type_config = self.types.get(class_name)
        if type_config is None or type_config.pk is None:
            return self.id
        merged = self.id.model_dump()
        merged.update(type_config.pk.model_dump(exclude_none=True))
        return IdConfig.model_validate(merged)

    def relation_table_name_for(self, class_name: str, property_name: str) -> Optional[str]:
        type_config = self.types.get(class_name)
        if type_config is None or property_name not in type_config.properties:
            return None
        return type_config.properties[property_name].relation_table_name

    def doctrine_attributes_for(self, class_name: str) -> Dict[str, Any]:
        type_config = self.types.get(class_name)
        if type_config is None:
            return {}
        return type_config.doctrine.attributes


# --- Validation Functions ---
def _format_validation_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        loc_parts = [str(loc_item) for loc_item in item.get("loc", ())]
        loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
        msg = item.get("msg", "Unknown validation error")
        messages.append(f"'{loc_str}': {msg}")
    return messages


def validate_operations(operations: Dict[str, Any], class_name: Optional[str] = None) -> OperationsConfig:
    """
    Validates the operations of a resource.

    Raises:
        ConfigurationError: If a group other than ``item`` or ``collection`` is
            present or a group is not a mapping of method to options
    """
    try:
        return OperationsConfig.model_validate(operations)
    except ValidationError as e:
        errors = _format_validation_errors(e)
        context = {'errors': "; ".join(errors)}
        if class_name:
            context['class'] = class_name
        raise ConfigurationError(
            f"Invalid operations configuration{f' for {class_name}' if class_name else ''}",
            context=context,
            suggestions=[
                f"Only the {', '.join(OperationGroups.ALL)} operation groups are supported",
                "Each group must map a method name to its options",
            ],
        ) from e


def validate_and_parse_config(config_dict: Optional[Dict[str, Any]], config_file: Optional[str] = None) -> GeneratorConfig:
    """
    Validates a raw configuration dictionary against the GeneratorConfig.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        validated_config = GeneratorConfig.model_validate(config_dict or {})
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your config file."
        )
        errors = _format_validation_errors(e)
        for error in errors:
            logger.error(f"  - {error}")
        raise ConfigurationError(
            "Configuration validation failed",
            config_file=config_file,
            context={'errors': "; ".join(errors)},
        ) from e


def load_config(config_path: Optional[str]) -> GeneratorConfig:
    """
    Loads configuration from a YAML file, validates it and returns a
    validated Pydantic model instance. A missing file yields the defaults.
    """
    raw_config: Dict[str, Any] = {}

    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML file {config_path}: {e}")
                raise ConfigurationError(f"Invalid YAML: {e}", config_file=config_path) from e

            if yaml_config and isinstance(yaml_config, dict):
                raw_config.update(yaml_config)
                logger.debug(f"Loaded configuration from {config_path}")
            elif yaml_config:
                raise ConfigurationError(
                    "Configuration document must be a mapping", config_file=config_path
                )
        else:
            logger.warning(f"Config file not found at {config_path}. Using defaults.")

    logger.info("Validating configuration...")
    validated_config = validate_and_parse_config(raw_config, config_file=config_path)
    logger.info("Configuration loaded and validated successfully.")
    return validated_config
