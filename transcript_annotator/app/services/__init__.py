"""Services composing the annotation pipeline."""

from .annotation_service import AnnotationService, lexical_form

__all__ = ["AnnotationService", "lexical_form"]
