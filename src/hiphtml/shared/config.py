"""Configuration classes for HTML parsing and cursor traversal.

This module provides configuration objects for the parse entry points and the
cursor, with validation on construction and dictionary/JSON round-tripping.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

# Tree builders BeautifulSoup accepts for HTML input
VALID_BACKENDS = ("html5lib", "lxml", "html.parser")

_COMPONENT_FIELDS = ("parser", "cursor")


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for building the document tree."""

    backend: str = "html5lib"
    from_encoding: Optional[str] = None  # Only consulted for bytes input
    exclude_encodings: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if self.backend not in VALID_BACKENDS:
            raise ValueError(f"backend must be one of {list(VALID_BACKENDS)}")
        if self.from_encoding is not None and not self.from_encoding.strip():
            raise ValueError("from_encoding must be a non-empty string or None")
        if self.from_encoding and self.from_encoding in self.exclude_encodings:
            raise ValueError("from_encoding cannot also be excluded")


@dataclass(frozen=True)
class CursorConfig:
    """Configuration for cursor behavior and diagnostics."""

    trace_moves: bool = False  # Debug-log every successful move
    log_searches: bool = True  # Debug-log outcomes of tag searches

    def __post_init__(self) -> None:
        """Validate cursor configuration."""
        if not isinstance(self.trace_moves, bool):
            raise ValueError("trace_moves must be a boolean")
        if not isinstance(self.log_searches, bool):
            raise ValueError("log_searches must be a boolean")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class HipHTMLConfig:
    """Complete configuration for parsing and traversal.

    Immutable once built, components included; use ``override`` to derive a
    modified copy.
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    cursor: CursorConfig = field(default_factory=CursorConfig)

    correlation_id: Optional[str] = None
    version: str = "1.0.0"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the component configurations."""
        try:
            self.parser.__post_init__()
            self.cursor.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e
        if self.correlation_id is not None and not self.correlation_id.strip():
            raise ConfigValidationError(
                "correlation_id must be a non-empty string or None",
                field_name="correlation_id",
            )

    def override(self, **kwargs: Any) -> "HipHTMLConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; component fields use the
                ``component__field`` notation

        Returns:
            New HipHTMLConfig instance with overrides applied

        Example:
            >>> config = HipHTMLConfig()
            >>> lxml_config = config.override(
            ...     parser__backend="lxml",
            ...     cursor__trace_moves=True
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENT_FIELDS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=[f"Use one of {list(_COMPONENT_FIELDS)}"],
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for field_name in _COMPONENT_FIELDS:
                current_config = getattr(self, field_name)
                if isinstance(nested_overrides.get(field_name), dict):
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
                elif field_name in nested_overrides:
                    new_fields[field_name] = nested_overrides[field_name]
            for key, value in nested_overrides.items():
                if key not in _COMPONENT_FIELDS:
                    new_fields[key] = value
            return replace(self, **new_fields)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, (list, tuple)):
                return [_dataclass_to_dict(item) for item in obj]
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HipHTMLConfig":
        """Create configuration from dictionary format.

        Raises:
            ConfigValidationError: If the dictionary holds unknown or invalid fields
        """
        try:
            parser = ParserConfig(**data.get("parser", {}))
            cursor = CursorConfig(**data.get("cursor", {}))
            extra = {
                key: value for key, value in data.items()
                if key not in _COMPONENT_FIELDS
            }
            return cls(parser=parser, cursor=cursor, **extra)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid configuration data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "HipHTMLConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON configuration: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("JSON configuration must be an object")
        return cls.from_dict(data)
