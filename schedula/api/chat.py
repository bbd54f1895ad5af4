from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from schedula.api.schemas import ChatErrorSchema, ChatRequestSchema, ChatResponseSchema
from schedula.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from schedula.application.use_cases.reply_composer import ReplyComposer
from schedula.wiring.dependencies import get_handle_chat_message_use_case, get_reply_composer


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/chat", response_model=ChatResponseSchema)
async def chat(
    request: Request,
    use_case: HandleChatMessageUseCase = Depends(get_handle_chat_message_use_case),
    composer: ReplyComposer = Depends(get_reply_composer),
):
    try:
        body = await request.body()
        payload = json.loads(body.decode("utf-8")) if body else {}
        chat_request = ChatRequestSchema.model_validate(payload)
    except Exception as e:
        logger.exception("Failed to parse chat request", extra={"error": str(e)})
        return _system_error(composer)

    try:
        reply = await run_in_threadpool(use_case.handle, chat_request.message, session_id=chat_request.session_id)
    except Exception as e:
        logger.exception("Error processing chat message", extra={"error": str(e)})
        return _system_error(composer)

    return ChatResponseSchema(
        response=reply.html,
        session_id=reply.session_id,
        intent=reply.extracted.intent,
    )


def _system_error(composer: ReplyComposer) -> JSONResponse:
    payload = ChatErrorSchema(response=composer.compose_system_error())
    return JSONResponse(status_code=500, content=payload.model_dump())
