"""Assistant templates: schemas, built-in library and catalog."""

from voice_matrix.domain.templates.catalog import TemplateCatalog, TemplateFilters, get_catalog
from voice_matrix.domain.templates.schemas import Template

__all__ = ["Template", "TemplateCatalog", "TemplateFilters", "get_catalog"]
