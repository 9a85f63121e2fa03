"""Read-only catalog of assistant templates."""

from functools import lru_cache
from typing import Iterable, Optional

from pydantic import BaseModel

from voice_matrix.domain.errors import TemplateNotFound
from voice_matrix.domain.templates.library import BUILTIN_TEMPLATES
from voice_matrix.domain.templates.schemas import (
    Industry,
    Template,
    TemplateComplexity,
    TemplateStatus,
)


class TemplateFilters(BaseModel):
    """Criteria for listing templates. Unset fields do not filter."""

    industries: list[Industry] = []
    category: Optional[str] = None
    complexity: Optional[TemplateComplexity] = None
    status: Optional[TemplateStatus] = TemplateStatus.ACTIVE
    tags: list[str] = []


class TemplateCatalog:
    """Lookup and filtering over a fixed set of templates."""

    def __init__(self, templates: Iterable[Template]):
        self._templates: dict[str, Template] = {}
        for template in templates:
            if template.id in self._templates:
                raise ValueError(f"Duplicate template id: {template.id}")
            self._templates[template.id] = template

    def get(self, template_id: str) -> Template:
        """Return the template with the given id.

        Raises:
            TemplateNotFound: If no template has this id
        """
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFound(template_id)
        return template

    def list(self, filters: Optional[TemplateFilters] = None) -> list[Template]:
        """Return templates matching all filters, ordered by id."""
        filters = filters or TemplateFilters()
        matches = [t for t in self._templates.values() if self._matches(t, filters)]
        return sorted(matches, key=lambda t: t.id)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    @staticmethod
    def _matches(template: Template, filters: TemplateFilters) -> bool:
        if filters.status is not None and template.status != filters.status:
            return False
        if filters.category is not None and template.category.primary != filters.category:
            return False
        if filters.complexity is not None and template.complexity != filters.complexity:
            return False
        if filters.industries and not set(filters.industries) & set(template.industries):
            return False
        if filters.tags:
            wanted = {tag.lower() for tag in filters.tags}
            if not wanted & {tag.lower() for tag in template.metadata.tags}:
                return False
        return True


@lru_cache
def get_catalog() -> TemplateCatalog:
    """Return the catalog of built-in templates."""
    return TemplateCatalog(BUILTIN_TEMPLATES)
