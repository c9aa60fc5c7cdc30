from __future__ import annotations

import logging

from fastapi import APIRouter

from replydesk.schemas import (
    ComposeOptionsResponse,
    ComposeRequest,
    ComposeResponse,
    ResponseTipOut,
    ToneOptionOut,
)
from replydesk.services.composer import ComposeInput, ResponseComposer
from replydesk.services.tips import RESPONSE_TIPS
from replydesk.services.tones import DEFAULT_TONE, TONE_OPTIONS, TONE_VALUES, resolve_tone
from replydesk.settings import settings

router = APIRouter(prefix="/compose", tags=["compose"])

_log = logging.getLogger(__name__)
_composer = ResponseComposer()


@router.post("", response_model=ComposeResponse)
def compose_reply(payload: ComposeRequest):
    # The configured default tone only preselects the form; the API itself
    # always defaults to professional.
    requested_tone = payload.tone or DEFAULT_TONE
    if requested_tone not in TONE_VALUES:
        _log.warning("Unknown tone %r, falling back to %s", requested_tone[:64], DEFAULT_TONE)

    reply = _composer.compose_reply(
        ComposeInput(
            company_name=payload.company_name or "",
            product_service=payload.product_service or "",
            customer_message=payload.customer_message or "",
            tone=requested_tone,
        )
    )
    if reply.kind is None:
        return ComposeResponse(response=reply.text, tone=reply.tone, kind=None, complete=False)

    _log.info("Composed %s reply (tone=%s)", reply.kind, reply.tone)
    return ComposeResponse(response=reply.text, tone=reply.tone, kind=reply.kind)


@router.get("/options", response_model=ComposeOptionsResponse)
def compose_options():
    return ComposeOptionsResponse(
        default_tone=resolve_tone(settings.default_tone),
        copy_feedback_ms=int(settings.copy_feedback_seconds * 1000),
        tones=[ToneOptionOut.model_validate(option) for option in TONE_OPTIONS],
        tips=[ResponseTipOut.model_validate(tip) for tip in RESPONSE_TIPS],
    )
