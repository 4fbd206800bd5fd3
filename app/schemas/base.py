"""Shared pydantic base for camelCase-aliased payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	"""Accepts snake_case or camelCase on input, emits camelCase by alias.

	The persisted client state blob uses camelCase keys (``sowingDate``,
	``precipChance``), so every schema that crosses the store or the HTTP
	boundary inherits from this.
	"""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
