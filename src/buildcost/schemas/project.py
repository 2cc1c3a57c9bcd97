"""Project inputs supplied by the caller."""

from pydantic import Field

from buildcost.schemas.base import CamelModel

# Kinds the prompts have productivity bands for; anything else is passed through.
PROJECT_TYPES = ("Residential", "Commercial", "Industrial", "Renovation")
QUALITY_TIERS = ("Economy", "Standard", "Premium")


class ProjectInputs(CamelModel):
    """A construction project to check or estimate.

    No range checks are applied here: judging whether the numbers make
    sense is the model's job.
    """

    project_type: str = Field(alias="type")  # see PROJECT_TYPES
    location: str
    size_sq_ft: float
    budget_limit: float
    quality: str  # see QUALITY_TIERS
    timeline_months: int
    manpower: int

    def prompt_fields(self) -> dict[str, object]:
        """Field values for prompt templates, with whole numbers shown without ``.0``."""
        fields = self.model_dump()
        for key, value in fields.items():
            if isinstance(value, float) and value.is_integer():
                fields[key] = int(value)
        return fields
