# taskboard/routers/graphql.py
from fastapi import APIRouter, Depends

from taskboard.database import EntityStore, get_store
from taskboard.schemas import GraphQLRequest
from taskboard.services.dispatcher import execute
from taskboard.utils.auth import get_current_user_id

router = APIRouter(prefix="/graphql", tags=["GraphQL"])


@router.post("")
def graphql_endpoint(
    payload: GraphQLRequest,
    store: EntityStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    """Run a named query or mutation

    Operation failures are returned as data with status 200.
    """
    return execute(store, payload.resolved_name, current_user_id, payload.variables)


@router.get("")
def graphql_status():
    return {"status": "OK"}
