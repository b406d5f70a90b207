"""Model browser projection."""

from schemaplane.viewer.projection import (
    CategoryGroup,
    FieldView,
    ModelView,
    SchemaView,
    find_model,
    project,
)

__all__ = ["CategoryGroup", "FieldView", "ModelView", "SchemaView", "find_model", "project"]
