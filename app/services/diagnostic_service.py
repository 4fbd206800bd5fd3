"""Generative-AI diagnostics — prompt assembly, Gemini calls, fallbacks.

Every public call on ``DiagnosticService`` returns a usable value even when
the remote service is down, misconfigured or returns garbage: transport and
parsing failures are logged and converted to the per-call fallback.
"""

from __future__ import annotations

import json
import uuid
from datetime import UTC, datetime
from typing import Any, Protocol

import httpx
import structlog
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.models.enums import AssistantAction
from app.schemas.diagnostics import CommandIntent
from app.schemas.state import DiagnosticCase
from app.services.growth_stage import resolve_stage
from app.services.state_store import StateStore

logger = structlog.get_logger("agrisynch.diagnostics")

DIAGNOSTIC_FALLBACK = (
	"The Diagnostic Engine encountered an error. "
	"Please ensure your device is synchronized and try again."
)
INTENT_FALLBACK_MESSAGE = "I'm sorry, I couldn't process that command."
ASSISTANT_VIEWS = ("home", "crops", "diagnostics", "library", "settings", "add", "caseLog")


class DiagnosticUnavailable(Exception):
	"""Raised by a client when it cannot produce a usable response."""


class GenerativeClient(Protocol):
	async def generate_content(
		self,
		model: str,
		parts: list[dict[str, Any]],
		generation_config: dict[str, Any] | None = None,
	) -> dict[str, Any]:
		...


class GeminiClient:
	"""Thin httpx wrapper around the Gemini ``generateContent`` REST call."""

	def __init__(
		self,
		settings: Settings | None = None,
		transport: httpx.AsyncBaseTransport | None = None,
	):
		self.settings = settings or get_settings()
		self.transport = transport

	async def generate_content(
		self,
		model: str,
		parts: list[dict[str, Any]],
		generation_config: dict[str, Any] | None = None,
	) -> dict[str, Any]:
		if not self.settings.gemini_api_key:
			raise DiagnosticUnavailable("gemini_api_key is not configured")

		url = f"{self.settings.gemini_base_url}/models/{model}:generateContent"
		headers = {
			"x-goog-api-key": self.settings.gemini_api_key,
			"content-type": "application/json",
		}
		body: dict[str, Any] = {"contents": [{"role": "user", "parts": parts}]}
		if generation_config:
			body["generationConfig"] = generation_config

		async with httpx.AsyncClient(
			timeout=self.settings.gemini_timeout_seconds,
			transport=self.transport,
		) as client:
			response = await client.post(url, headers=headers, json=body)
			response.raise_for_status()

		try:
			payload = response.json()
		except ValueError as exc:
			raise DiagnosticUnavailable("response is not JSON") from exc

		if not isinstance(payload, dict):
			raise DiagnosticUnavailable("unexpected response shape")
		return payload


def _first_parts(payload: dict[str, Any]) -> list[dict[str, Any]]:
	candidates = payload.get("candidates")
	if not isinstance(candidates, list) or not candidates:
		raise DiagnosticUnavailable("response has no candidates")
	content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
	parts = content.get("parts") if isinstance(content, dict) else None
	if not isinstance(parts, list) or not parts:
		raise DiagnosticUnavailable("response has no content parts")
	return [part for part in parts if isinstance(part, dict)]


def response_text(payload: dict[str, Any]) -> str:
	text = "".join(str(part.get("text") or "") for part in _first_parts(payload)).strip()
	if not text:
		raise DiagnosticUnavailable("response has no text")
	return text


def response_inline_data(payload: dict[str, Any]) -> str:
	for part in _first_parts(payload):
		inline = part.get("inlineData")
		if isinstance(inline, dict) and inline.get("data"):
			return str(inline["data"])
	raise DiagnosticUnavailable("response has no inline data")


def split_data_url(data: str, default_mime: str) -> tuple[str, str]:
	"""Return (mime type, base64 body) for a data URL or a bare base64 string."""
	if data.startswith("data:") and "," in data:
		header, body = data.split(",", 1)
		mime = header[len("data:"):].split(";", 1)[0] or default_mime
		return mime, body
	return default_mime, data


class DiagnosticService:
	def __init__(self, client: GenerativeClient | None = None, settings: Settings | None = None):
		self.settings = settings or get_settings()
		self.client = client or GeminiClient(self.settings)

	async def get_diagnostic_advice(
		self,
		crop_name: str,
		stage: str,
		description: str,
		image_data: str | None = None,
	) -> str:
		prompt = (
			"Act as a senior PhD Agricultural Pathologist. A farmer needs a detailed diagnosis.\n"
			"Field Context:\n"
			f"- Crop: {crop_name}\n"
			f"- Growth Stage: {stage}\n"
			f"- Symptoms Reported: {description}\n\n"
			"Instruction:\n"
			"1. Identify the most likely disease/pest.\n"
			"2. Explain the cause (biological or environmental).\n"
			"3. Provide a 3-step immediate intervention (Organic/Chemical/Mechanical).\n"
			"4. List 2 long-term soil/management preventions.\n\n"
			"Keep language professional yet actionable."
		)
		parts: list[dict[str, Any]] = []
		if image_data:
			mime, body = split_data_url(image_data, "image/jpeg")
			parts.append({"inlineData": {"mimeType": mime, "data": body}})
		parts.append({"text": prompt})

		try:
			payload = await self.client.generate_content(
				self.settings.gemini_diagnostic_model,
				parts,
				{"thinkingConfig": {"thinkingBudget": self.settings.gemini_thinking_budget}},
			)
			return response_text(payload)
		except (httpx.HTTPError, DiagnosticUnavailable) as exc:
			logger.warning("diagnostic_failed", crop=crop_name, error=str(exc))
			return DIAGNOSTIC_FALLBACK

	async def transcribe_audio(self, base64_audio: str, mime_type: str = "audio/webm") -> str | None:
		mime, body = split_data_url(base64_audio, mime_type)
		parts = [
			{"inlineData": {"mimeType": mime, "data": body}},
			{
				"text": (
					"Transcribe the following agricultural voice note exactly. "
					"If it's in a regional language like Hindi or Marathi, translate it to English."
				)
			},
		]
		try:
			payload = await self.client.generate_content(self.settings.gemini_transcription_model, parts)
			return response_text(payload)
		except (httpx.HTTPError, DiagnosticUnavailable) as exc:
			logger.warning("transcription_failed", error=str(exc))
			return None

	async def process_command_intent(self, text: str) -> CommandIntent:
		prompt = (
			f'You are the AgriSynch Voice Assistant. Interpret the following user command: "{text}".\n\n'
			f"Available views: {', '.join(ASSISTANT_VIEWS)}.\n\n"
			"Respond ONLY with a JSON object in this format:\n"
			'{"action": "NAVIGATE" | "SPEAK" | "QUERY", "target": "view_name", '
			'"message": "confirmation or answer text"}\n\n'
			"If the user wants to see their crops, navigate to 'crops'.\n"
			"If they want to add a field, navigate to 'add'.\n"
			"If they want to ask the expert, navigate to 'diagnostics'.\n"
			"If they ask a general question about crops or soil, use 'SPEAK' and provide a short, helpful answer."
		)
		try:
			payload = await self.client.generate_content(
				self.settings.gemini_intent_model,
				[{"text": prompt}],
				{"responseMimeType": "application/json"},
			)
			parsed = json.loads(response_text(payload))
			if not isinstance(parsed, dict):
				raise DiagnosticUnavailable("intent response is not an object")
			intent = CommandIntent.model_validate(parsed)
		except (httpx.HTTPError, DiagnosticUnavailable, json.JSONDecodeError, ValidationError) as exc:
			logger.warning("intent_failed", error=str(exc))
			return CommandIntent(action=AssistantAction.speak, message=INTENT_FALLBACK_MESSAGE)

		if intent.action == AssistantAction.navigate and intent.target not in ASSISTANT_VIEWS:
			return CommandIntent(action=AssistantAction.speak, message=intent.message or INTENT_FALLBACK_MESSAGE)
		return intent

	async def generate_speech(self, text: str) -> str | None:
		config = {
			"responseModalities": ["AUDIO"],
			"speechConfig": {
				"voiceConfig": {"prebuiltVoiceConfig": {"voiceName": self.settings.gemini_speech_voice}},
			},
		}
		try:
			payload = await self.client.generate_content(
				self.settings.gemini_speech_model,
				[{"text": f"AgriSynch Assistant says: {text}"}],
				config,
			)
			return response_inline_data(payload)
		except (httpx.HTTPError, DiagnosticUnavailable) as exc:
			logger.warning("speech_failed", error=str(exc))
			return None


class DiagnosticCaseService:
	"""Runs a diagnosis for a registered crop and records it in the history."""

	def __init__(self, store: StateStore, diagnostics: DiagnosticService | None = None):
		self.store = store
		self.diagnostics = diagnostics or DiagnosticService()

	async def diagnose(
		self,
		*,
		crop_id: str | None,
		description: str,
		image_data: str | None = None,
		now: datetime | None = None,
	) -> DiagnosticCase:
		now = now or datetime.now(UTC)
		state = await self.store.load()

		crop = None
		if crop_id is not None:
			crop = next((item for item in state.crops if item.id == crop_id), None)
			if crop is None:
				raise LookupError(f"Crop {crop_id} not found")
		elif state.crops:
			crop = state.crops[0]

		crop_name = str(crop.type) if crop else "General Crop"
		stage = str(resolve_stage(crop.type, crop.sowing_date, now)) if crop else "Unknown"
		diagnosis = await self.diagnostics.get_diagnostic_advice(
			crop_name,
			stage,
			description or "Visual inspection requested.",
			image_data,
		)

		case = DiagnosticCase(
			id=uuid.uuid4().hex,
			timestamp=now.isoformat(timespec="seconds"),
			crop_nickname=crop.nickname if crop and crop.nickname else "Field Query",
			description=description,
			diagnosis=diagnosis,
			image_url=image_data,
		)

		state = await self.store.load()
		limit = get_settings().diagnostic_history_limit
		state.diagnostic_history = [case, *state.diagnostic_history][:limit]
		await self.store.save(state)
		return case

	async def history(self) -> list[DiagnosticCase]:
		state = await self.store.load()
		return list(state.diagnostic_history)
