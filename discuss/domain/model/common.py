"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are frozen. A changed entity is a new instance built with
    ``evolve``, which validates the result like any other constructor call
    (``model_copy`` does not).
    """

    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> Self:
        """Copy of this model with some fields replaced.

        Raises:
            pydantic.ValidationError: If the changed model is invalid
        """
        return self.model_validate({**self.model_dump(), **changes})
