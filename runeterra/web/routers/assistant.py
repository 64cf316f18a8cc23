"""Assistant endpoints mirroring the chat commands."""

from __future__ import annotations

from fastapi import APIRouter, Query

from runeterra.application import AnswerResponse, AskRequest, MentionRequest, MentionResponse
from runeterra.bootstrap import get_container

router = APIRouter()


@router.post("/ask")
async def ask(request: AskRequest) -> AnswerResponse:
    answer = await get_container().assistant.ask(request.query)
    return AnswerResponse.from_answer(answer)


@router.get("/champ")
async def champion(name: str = Query(..., min_length=1)) -> AnswerResponse:
    return AnswerResponse.from_answer(await get_container().assistant.champion(name))


@router.get("/item")
async def item(name: str = Query(..., min_length=1)) -> AnswerResponse:
    return AnswerResponse.from_answer(await get_container().assistant.item(name))


@router.get("/region")
async def region(name: str = Query(..., min_length=1)) -> AnswerResponse:
    return AnswerResponse.from_answer(get_container().assistant.region(name))


@router.get("/help")
async def help_text() -> AnswerResponse:
    return AnswerResponse.from_answer(get_container().assistant.help())


@router.post("/mention")
async def mention(request: MentionRequest) -> MentionResponse:
    answer = await get_container().assistant.mention(request.user_id, request.content, request.bot_id)
    if answer is None:
        return MentionResponse(dropped=True)
    return MentionResponse(answer=AnswerResponse.from_answer(answer))
