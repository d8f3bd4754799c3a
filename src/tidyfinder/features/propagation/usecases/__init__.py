"""Use cases for template propagation."""

from .ports import MetadataFileSystem
from .propagate_template import PropagationEvent, TemplatePropagationEngine

__all__ = ["MetadataFileSystem", "PropagationEvent", "TemplatePropagationEngine"]
