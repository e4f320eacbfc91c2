"""
Exception hierarchy for the schema generator.

Every error carries a context mapping describing where it happened and a
list of suggestions for the user; subclasses provide defaults for both.
"""

from typing import Dict, Any, Optional, List


class SchemaGeneratorError(Exception):
    """
    Base exception for all schema generator errors.

    Subclasses set ``error_code`` and ``default_suggestions``; the suggestions
    are used when the caller does not provide any.
    """

    error_code: Optional[str] = None
    default_suggestions: List[str] = []

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Args:
            message: Human-readable error message
            context: Where and why the error occurred
            suggestions: Potential solutions or next steps
            error_code: Code for programmatic handling, overriding the class default
        """
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})
        self.suggestions = list(suggestions or self.default_suggestions)
        if error_code:
            self.error_code = error_code

    def _add_context(self, **items: Any) -> None:
        """Record the given items, skipping empty ones."""
        self.context.update({key: value for key, value in items.items() if value})

    def __str__(self) -> str:
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            lines.extend(f"  {key}: {value}" for key, value in self.context.items())

        if self.suggestions:
            lines.append("Suggestions:")
            lines.extend(f"  • {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines)


class ConfigurationError(SchemaGeneratorError):
    """Raised when configuration is invalid or cannot be read."""

    error_code = "CONFIG_ERROR"
    default_suggestions = [
        "Check the configuration file syntax",
        "Verify all keys are spelled as documented (camelCase)",
        "Check the documentation for configuration examples",
    ]

    def __init__(self, message: str, config_file: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self._add_context(config_file=config_file)


class RelationshipError(SchemaGeneratorError):
    """
    A relation target that cannot be resolved.

    Recorded by the persistence-mapping generator rather than raised, so the
    remaining classes are still generated.
    """

    error_code = "RELATIONSHIP_ERROR"
    default_suggestions = [
        "Verify the target class is part of the generated vocabulary",
        "Check the spelling of the property range",
        "Mark the property as custom and configure it manually",
    ]

    def __init__(
        self,
        message: str,
        source_class: Optional[str] = None,
        property_name: Optional[str] = None,
        target: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self._add_context(**{'class': source_class, 'property': property_name, 'type': target})


class CodeGenerationError(SchemaGeneratorError):
    """Raised when an existing module cannot be loaded or rendered."""

    error_code = "CODE_GENERATION_ERROR"
    default_suggestions = [
        "Check the existing module for syntax errors",
        "Regenerate the module from scratch to compare",
    ]

    def __init__(self, message: str, component: Optional[str] = None, class_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        # component is e.g. 'loader' or 'renderer'
        self._add_context(component=component, **{'class': class_name})
