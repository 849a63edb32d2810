# taskboard/schemas/graphql.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class GraphQLRequest(BaseModel):
    """Request body of POST /graphql

    ``query`` names the operation; ``operationName`` takes precedence when
    the client sends both.
    """

    query: str = ""
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(default=None, alias="operationName")

    model_config = {
        "populate_by_name": True
    }

    @property
    def resolved_name(self) -> str:
        return (self.operation_name or self.query or "").strip()

