"""Conversion routes: A2UI graph to card, model reply to outgoing message."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..schemas import ConvertResponse, GraphPayload, ReplyRequest, ReplyResponse
from ...converter import CardConverter
from ...errors import GraphError
from ...messaging import reply_for_model_output

log = logging.getLogger(__name__)


def build_convert_router(converter: CardConverter) -> APIRouter:
    router = APIRouter()

    @router.post("/api/convert", response_model=ConvertResponse)
    def api_convert(payload: GraphPayload) -> ConvertResponse:
        try:
            card = converter.convert_payload(payload.model_dump(by_alias=True))
        except GraphError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        log.info("Converted graph with %d component(s)", len(payload.components))
        return ConvertResponse(card=card)

    @router.post("/api/reply", response_model=ReplyResponse)
    def api_reply(req: ReplyRequest) -> ReplyResponse:
        message = reply_for_model_output(req.text, converter)
        return ReplyResponse(**message.to_dict())

    return router


__all__ = ["build_convert_router"]
