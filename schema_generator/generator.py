"""
Schema generator facade.

Runs the class mutators over the whole model, then merges every class into
its generated module.
"""

import logging
from typing import Dict, List, Mapping, Optional, Union

from .ast_codegen import GeneratedFile, class_to_file, load_file, render_file
from .attribute_generators import AttributeGeneratorFactory
from .class_mutators import (
    AnnotationsAppender, AttributeAppender, ClassIdAppender, ClassMutator, ConstructorFlagsMutator
)
from .colored_logging import log_progress, log_section, log_success
from .config_validation import GeneratorConfig
from .domain.models import ClassInfo
from .domain.type_inference import TypeConverter
from .exceptions import RelationshipError

logger = logging.getLogger(__name__)

ExistingFile = Union[str, GeneratedFile]


class SchemaGenerator:
    """Facade for the generation system"""

    def __init__(
        self,
        config: Optional[GeneratorConfig],
        classes: Dict[str, ClassInfo],
        type_converter: Optional[TypeConverter] = None,
    ):
        self.config = config if config is not None else GeneratorConfig()
        self.classes = classes
        self.type_converter = type_converter or TypeConverter()
        self.attribute_generators = AttributeGeneratorFactory.create_all(
            self.config, self.classes, self.type_converter
        )
        self.mutators: List[ClassMutator] = [
            ClassIdAppender(self.config),
            ConstructorFlagsMutator(self.classes),
            AnnotationsAppender(),
            AttributeAppender(self.attribute_generators),
        ]
        self._mutated = False

    @property
    def resolution_errors(self) -> List[RelationshipError]:
        """Relation targets that could not be resolved, across all generators."""
        errors: List[RelationshipError] = []
        for generator in self.attribute_generators:
            errors.extend(getattr(generator, "resolution_errors", []))
        return errors

    def mutate(self) -> Dict[str, ClassInfo]:
        """Run every mutator over every class, once."""
        if self._mutated:
            return self.classes

        log_section(logger, "Class Mutation")
        for mutator in self.mutators:
            log_progress(logger, f"Mutating classes with {type(mutator).__name__}")
            for class_ in self.classes.values():
                mutator(class_)
        self._mutated = True
        return self.classes

    def generate(self, existing: Optional[Mapping[str, ExistingFile]] = None) -> Dict[str, GeneratedFile]:
        """
        Generate one file per class.

        Args:
            existing: Previously generated modules keyed by class name, given
                as source or as already loaded files

        Returns:
            Merged files keyed by class name
        """
        existing = existing or {}
        self.mutate()

        log_section(logger, "Code Generation")
        files: Dict[str, GeneratedFile] = {}
        for name, class_ in self.classes.items():
            previous = existing.get(name)
            if isinstance(previous, str):
                log_progress(logger, f"Loading existing module for {name}")
                previous = load_file(previous, class_.namespace)
            log_progress(logger, f"Merging class {name}")
            files[name] = class_to_file(class_, self.config, previous, self.type_converter)

        errors = self.resolution_errors
        if errors:
            logger.warning(f"{len(errors)} relation(s) could not be resolved")
        log_success(logger, f"Generated {len(files)} class module(s) successfully")
        return files

    def render(
        self,
        existing: Optional[Mapping[str, ExistingFile]] = None,
        format_code: bool = False,
    ) -> Dict[str, str]:
        """Generate and render every class to Python source, keyed by class name."""
        files = self.generate(existing)
        log_progress(logger, "Rendering generated modules")
        return {name: render_file(file, format_code=format_code) for name, file in files.items()}
