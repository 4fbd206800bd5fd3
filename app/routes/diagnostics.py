"""Diagnostic expert and voice assistant routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas.diagnostics import (
	CommandIntent,
	DiagnosticHistoryRead,
	DiagnosticRequest,
	DiagnosticResponse,
	IntentRequest,
	SpeechRequest,
	SpeechResponse,
	TranscribeRequest,
	TranscribeResponse,
)
from app.services.diagnostic_service import DiagnosticCaseService, DiagnosticService
from app.services.state_store import StateStore
from app.store import get_state_store

router = APIRouter(tags=["diagnostics"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="diagnostic failure")


def get_diagnostic_service() -> DiagnosticService:
	return DiagnosticService()


@router.post("/diagnostics", response_model=DiagnosticResponse)
async def run_diagnostic(
	payload: DiagnosticRequest,
	store: StateStore = Depends(get_state_store),
	diagnostics: DiagnosticService = Depends(get_diagnostic_service),
) -> DiagnosticResponse:
	service = DiagnosticCaseService(store, diagnostics)
	try:
		case = await service.diagnose(
			crop_id=payload.crop_id,
			description=payload.description,
			image_data=payload.image_data,
		)
	except Exception as exc:
		raise _map_error(exc) from exc
	return DiagnosticResponse(case=case)


@router.get("/diagnostics/history", response_model=DiagnosticHistoryRead)
async def diagnostic_history(store: StateStore = Depends(get_state_store)) -> DiagnosticHistoryRead:
	try:
		items = await DiagnosticCaseService(store).history()
	except Exception as exc:
		raise _map_error(exc) from exc
	return DiagnosticHistoryRead(items=items)


@router.post("/assistant/transcribe", response_model=TranscribeResponse)
async def transcribe(
	payload: TranscribeRequest,
	diagnostics: DiagnosticService = Depends(get_diagnostic_service),
) -> TranscribeResponse:
	text = await diagnostics.transcribe_audio(payload.audio, payload.mime_type)
	return TranscribeResponse(text=text)


@router.post("/assistant/intent", response_model=CommandIntent)
async def parse_intent(
	payload: IntentRequest,
	diagnostics: DiagnosticService = Depends(get_diagnostic_service),
) -> CommandIntent:
	return await diagnostics.process_command_intent(payload.text)


@router.post("/assistant/speech", response_model=SpeechResponse)
async def speech(
	payload: SpeechRequest,
	diagnostics: DiagnosticService = Depends(get_diagnostic_service),
) -> SpeechResponse:
	audio = await diagnostics.generate_speech(payload.text)
	return SpeechResponse(audio=audio)
