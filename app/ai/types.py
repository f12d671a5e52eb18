from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GenerationParameters:
    max_output_tokens: int
    temperature: float
    top_p: float
    top_k: int


class GenerativeClient(Protocol):
    @property
    def model(self) -> str: ...

    async def generate(self, prompt: str, params: GenerationParameters) -> str: ...
