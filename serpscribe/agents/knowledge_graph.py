"""Agent that turns reference text into a knowledge-graph outline."""

import logging

from pydantic import BaseModel

from serpscribe.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)


class KnowledgeGraphInput(BaseModel):
    """Input for the knowledge-graph agent."""

    text: str


class KnowledgeGraphAgent(BaseAgent[KnowledgeGraphInput, str]):
    """Maps how a reference article is written as a single-root text graph.

    The graph feeds article refinement as structural writing suggestions.
    """

    model_tier = "standard"
    temperature = 0.3

    @property
    def system_prompt(self) -> str:
        return """You act as a knowledge-graph API. Turn the way the author wrote the given text into one knowledge graph and draw it directly as text. Do not use Python or Mermaid.

All branches must start from one root node. Pay attention to the distance between words in each sentence, and output the complete graph.

Answer under the heading:
## Graph Knowledge Visualization

Example layout:
[Root entity]──(identity)──>【Description】
     └──(past event)──>【Event】
     └──(recent event)──>【Event】
                              └──(result)──>【Outcome】
     └──(triggered)──>【Public discussion】
                    └──(topic 1)──>【Topic】
                    └──(topic 2)──>【Topic】"""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: KnowledgeGraphInput) -> str:
        # Treat the whole text as one paragraph.
        paragraph = " ".join(input_data.text.split())
        return f"Target text:\n{paragraph}"
