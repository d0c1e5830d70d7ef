"""Base class for Pydantic AI agents."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar, cast

from pydantic import BaseModel
from pydantic_ai import Agent

from serpscribe.config import settings

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for Pydantic AI agents.

    Each agent should:
    1. Define the system_prompt property
    2. Define the output_type property (``str`` for free-text agents)
    3. Implement _build_prompt to construct the user prompt
    """

    # Model tier for environment-aware resolution (reasoning / standard / fast)
    model_tier: str = "standard"
    # Explicit model override at the class level (bypasses tier resolution)
    model: str | None = None
    temperature: float = 0.7
    max_retries: int = settings.llm_max_retries

    def __init__(self, model_override: str | None = None) -> None:
        """Initialize the agent.

        Model resolution priority:
        1. model_override parameter (explicit runtime override)
        2. model class attribute (if set by subclass)
        3. settings.get_model(self.model_tier) (environment-aware tier fallback)
        """
        if model_override:
            self._model = model_override
            model_source = "runtime_override"
        elif self.model:
            self._model = self.model
            model_source = "class_override"
        else:
            self._model = settings.get_model(self.model_tier)
            model_source = "tier_default"
        self._agent: Agent[None, OutputT] | None = None

        logger.debug(
            "Agent initialized",
            extra={
                "agent": self.__class__.__name__,
                "model": self._model,
                "model_tier": self.model_tier,
                "model_source": model_source,
                "temperature": self.temperature,
            },
        )

    @property
    def agent(self) -> Agent[None, OutputT]:
        """Lazily initialize and return the Pydantic AI agent."""
        if self._agent is None:
            self._agent = cast(
                Agent[None, OutputT],
                Agent(
                    model=self._model,
                    output_type=self.output_type,
                    system_prompt=self.system_prompt,
                    retries=self.max_retries,
                    model_settings={"temperature": self.temperature},
                ),
            )
        agent = self._agent
        assert agent is not None
        return agent

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """System prompt for the agent."""
        pass

    @property
    @abstractmethod
    def output_type(self) -> type[OutputT]:
        """Output type: a Pydantic model for structured output, or ``str``."""
        pass

    @abstractmethod
    def _build_prompt(self, input_data: InputT) -> str:
        """Build the user prompt from input data.

        Args:
            input_data: Input data for the agent.

        Returns:
            User prompt string.
        """
        pass

    async def run(self, input_data: InputT) -> OutputT:
        """Run the agent with input data.

        Args:
            input_data: Pydantic model with input parameters.

        Returns:
            Output as defined by output_type.
        """
        agent_name = self.__class__.__name__
        prompt = self._build_prompt(input_data)
        logger.info(
            "Prompt built, sending to LLM",
            extra={
                "agent": agent_name,
                "prompt_length": len(prompt),
                "model": self._model,
            },
        )

        t0 = time.perf_counter()
        result = await self.agent.run(prompt)
        elapsed = time.perf_counter() - t0

        self._log_usage(agent_name, elapsed, result.usage(), type(result.output).__name__)
        return result.output

    async def stream_text(self, input_data: InputT) -> AsyncIterator[str]:
        """Yield text deltas as the model produces them.

        Leaving the generator early (client disconnect, cancellation) exits
        the underlying stream context, which closes the upstream response.
        """
        agent_name = self.__class__.__name__
        prompt = self._build_prompt(input_data)
        logger.info(
            "Prompt built, opening LLM stream",
            extra={
                "agent": agent_name,
                "prompt_length": len(prompt),
                "model": self._model,
            },
        )

        t0 = time.perf_counter()
        async with self.agent.run_stream(prompt) as result:
            async for delta in result.stream_text(delta=True):
                if delta:
                    yield delta
            self._log_usage(agent_name, time.perf_counter() - t0, result.usage(), "stream")

    def _log_usage(self, agent_name: str, elapsed: float, usage: Any, output_type: str) -> None:
        logger.info(
            "Agent run completed",
            extra={
                "agent": agent_name,
                "duration_s": round(elapsed, 2),
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
                "total_tokens": usage.total_tokens,
                "output_type": output_type,
            },
        )


class TextRecommendationInput(BaseModel):
    """Input for agents that condense an analysis report into a recommendation."""

    keyword: str
    analysis_text: str
