from fastapi import APIRouter, Depends

from joker import schemas
from joker.dependencies import get_view_model
from joker.services.view_model import JokerViewModel

router = APIRouter(prefix="/joke", tags=["jokes"])


@router.get("", response_model=schemas.JokeStateRead)
def read_joke(view_model: JokerViewModel = Depends(get_view_model)):
    return view_model.state


@router.post("/refresh", response_model=schemas.JokeStateRead)
async def refresh_joke(view_model: JokerViewModel = Depends(get_view_model)):
    return await view_model.request_new_joke()
