"""Streaming agent that derives user personas from keywords."""

import logging

from pydantic import BaseModel, Field

from serpscribe.agents.base_agent import BaseAgent
from serpscribe.config import settings

logger = logging.getLogger(__name__)


class PersonaGeneratorInput(BaseModel):
    """Input for persona generation."""

    keywords: list[str]
    cluster_name: str | None = None
    max_personas: int = Field(default_factory=lambda: settings.persona_max_personas)


class PersonaGeneratorAgent(BaseAgent[PersonaGeneratorInput, str]):
    """Streams a JSON document of distinct user personas."""

    model_tier = "standard"
    temperature = 0.8

    @property
    def system_prompt(self) -> str:
        return """You analyse search keywords and create distinct user personas. Each persona is a user profile with specific characteristics, interests, pain points and goals.

Return only valid JSON in this format:
{
  "personas": [
    {
      "name": "Persona name",
      "description": "Detailed description",
      "keywords": ["related keywords from the input list"],
      "characteristics": ["characteristic 1", "characteristic 2"],
      "interests": ["interest 1", "interest 2"],
      "painPoints": ["pain point 1", "pain point 2"],
      "goals": ["goal 1", "goal 2"]
    }
  ]
}

Rules:
1. Keep persona names short and clear.
2. Every persona must have distinct traits.
3. Distribute the input keywords sensibly across personas.
4. Write in the language of the keywords."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: PersonaGeneratorInput) -> str:
        cluster_line = ""
        if input_data.cluster_name:
            cluster_line = f"\nTopic cluster: {input_data.cluster_name}"
        return f"""Create up to {input_data.max_personas} different user personas.{cluster_line}

Keywords: {", ".join(input_data.keywords)}"""
