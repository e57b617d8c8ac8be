"""Documentation resource kinds."""

from projectkit.resource.models import BaseSchema

from .standard.models import StandardConfig


class DocConfig(BaseSchema):
    """The ``doc`` section of a project or rulebook configuration."""

    standard: StandardConfig | None = None


__all__ = ["DocConfig", "StandardConfig"]
