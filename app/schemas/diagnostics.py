"""Pydantic schemas for diagnostics and the voice assistant."""

from __future__ import annotations

from pydantic import Field, model_validator

from app.models.enums import AssistantAction
from app.schemas.base import CamelModel
from app.schemas.state import DiagnosticCase


class DiagnosticRequest(CamelModel):
	crop_id: str | None = None
	description: str = Field(default="", max_length=4000)
	image_data: str | None = None

	@model_validator(mode="after")
	def _validate_payload(self) -> "DiagnosticRequest":
		if not self.description.strip() and not self.image_data:
			raise ValueError("provide a description or an image")
		return self


class DiagnosticResponse(CamelModel):
	case: DiagnosticCase


class DiagnosticHistoryRead(CamelModel):
	items: list[DiagnosticCase] = Field(default_factory=list)


class TranscribeRequest(CamelModel):
	audio: str = Field(min_length=1)
	mime_type: str = "audio/webm"


class TranscribeResponse(CamelModel):
	text: str | None = None


class IntentRequest(CamelModel):
	text: str = Field(min_length=1, max_length=2000)


class CommandIntent(CamelModel):
	action: AssistantAction = AssistantAction.speak
	target: str | None = None
	message: str = ""


class SpeechRequest(CamelModel):
	text: str = Field(min_length=1, max_length=2000)


class SpeechResponse(CamelModel):
	audio: str | None = None
