from typing import Annotated
from typing import Final
from typing import final

from fastapi import Depends
from fastapi.routing import APIRouter
from pydantic import BaseModel

from assistantbot.app_state import AppState
from assistantbot.dependencies import get_app_state
from assistantbot.directives.parser import parse_directives

router: Final = APIRouter(prefix="/directives")


@final
class ParseDirectivesRequest(BaseModel):
    message: str


@final
class ParseDirectivesResponse(BaseModel):
    clean_message: str
    variables: dict[str, str]
    flags: list[str]


@router.post("/parse")
async def parse(
    request: ParseDirectivesRequest,
    app_state: Annotated[AppState, Depends(get_app_state)],
) -> ParseDirectivesResponse:
    result: Final = parse_directives(request.message, markers=app_state.config.markers)
    return ParseDirectivesResponse(
        clean_message=result.clean_message,
        variables=result.variables,
        flags=result.flags,
    )
