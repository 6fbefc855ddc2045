from pydantic import BaseModel, ConfigDict
from typing import Any, Dict


class PatchModel(BaseModel):
    """
    Base for partial-update bodies.

    Only fields that are present and truthy are written; an empty string or
    a zero id leaves the stored value unchanged.
    """
    model_config = ConfigDict(populate_by_name=True)

    def changes(self) -> Dict[str, Any]:
        return {field: value for field, value in self.model_dump(exclude_unset=True).items() if value}
