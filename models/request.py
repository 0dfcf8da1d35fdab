"""BuildRequest Pydantic model with strict validation (extra=forbid)."""

from pydantic import BaseModel, ConfigDict

from models.selectors import SelectorNode


class BuildRequest(BaseModel):
    """Incoming request body for the POST /selectors endpoint.

    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    selector: SelectorNode
