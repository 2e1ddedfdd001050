"""
llm_config.py
=============
LLM provider configuration for the abstractive summarizer.

Supports Groq, Gemini and OpenAI through pydantic-ai.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic_ai import Agent
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.groq import GroqModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.groq import GroqProvider
from pydantic_ai.providers.openai import OpenAIProvider

# ============================================================================
# 1. CONFIG DATACLASS
# ============================================================================


@dataclass
class LLMConfig:
    """Configuration for an LLM provider.

    Attributes:
        provider: Provider name ('groq', 'gemini', 'openai')
        model_name: Model identifier string
        api_key: API key for authentication
        temperature: Sampling temperature (0.0-2.0). Defaults to 0.3.
        max_tokens: Maximum tokens for generation. Defaults to 300.
    """

    provider: str
    model_name: str
    api_key: str
    temperature: float = 0.3
    max_tokens: int | None = 300

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If API key or model name is missing.
        """
        if not self.api_key:
            raise ValueError(f'API key required for {self.provider}')
        if not self.model_name:
            raise ValueError(f'Model name required for {self.provider}')

    @property
    def model_settings(self) -> dict[str, Any]:
        """Generation settings passed to the agent."""
        settings: dict[str, Any] = {'temperature': self.temperature}
        if self.max_tokens:
            settings['max_tokens'] = self.max_tokens
        return settings


# ============================================================================
# 2. PROVIDER FACTORIES
# ============================================================================


def create_groq_model(config: LLMConfig) -> GroqModel:
    """Create a Groq model from configuration."""
    return GroqModel(config.model_name, provider=GroqProvider(api_key=config.api_key))


def create_gemini_model(config: LLMConfig) -> GoogleModel:
    """Create a Gemini (Google) model from configuration."""
    return GoogleModel(config.model_name, provider=GoogleProvider(api_key=config.api_key))


def create_openai_model(config: LLMConfig) -> OpenAIChatModel:
    """Create an OpenAI model from configuration."""
    return OpenAIChatModel(config.model_name, provider=OpenAIProvider(api_key=config.api_key))


PROVIDER_FACTORIES = {
    'groq': create_groq_model,
    'gemini': create_gemini_model,
    'google': create_gemini_model,  # Alias
    'openai': create_openai_model,
    'gpt': create_openai_model,  # Alias
}

DEFAULT_MODELS = {
    'groq': 'llama-3.3-70b-versatile',
    'gemini': 'gemini-2.0-flash',
    'openai': 'gpt-4o-mini',
}

# (environment variable, provider) in order of preference
API_KEY_VARIABLES = (
    ('GROQ_KEY', 'groq'),
    ('GEMINI_KEY', 'gemini'),
    ('OPENAI_API_KEY', 'openai'),
)


def create_model(config: LLMConfig) -> Any:
    """
    Create a model from configuration.

    Args:
        config: LLMConfig specifying the provider and parameters

    Returns:
        Model instance (GroqModel, GoogleModel or OpenAIChatModel)

    Raises:
        ValueError: If provider is not supported
    """
    provider_name = config.provider.lower()

    if provider_name not in PROVIDER_FACTORIES:
        available = ', '.join(PROVIDER_FACTORIES.keys())
        raise ValueError(f'Unknown provider: {provider_name}. Available: {available}')

    return PROVIDER_FACTORIES[provider_name](config)


def create_agent(config: LLMConfig, system_prompt: str) -> Agent[None, str]:
    """
    Create a text-output pydantic-ai agent from configuration.

    Args:
        config: LLMConfig specifying the provider and parameters
        system_prompt: System prompt for the agent

    Returns:
        Configured Agent
    """
    model = create_model(config)
    return Agent(model, system_prompt=system_prompt, model_settings=config.model_settings)


def llm_config_from_env(environ: Mapping[str, str] | None = None) -> LLMConfig | None:
    """Build an LLMConfig from the first provider key found in the environment.

    ``NEWSBRIEF_LLM_MODEL`` overrides the provider's default model.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        LLMConfig, or None when no API key is configured.
    """
    environ = os.environ if environ is None else environ

    for variable, provider in API_KEY_VARIABLES:
        api_key = environ.get(variable)
        if api_key:
            model_name = environ.get('NEWSBRIEF_LLM_MODEL') or DEFAULT_MODELS[provider]
            return LLMConfig(provider=provider, model_name=model_name, api_key=api_key)

    return None
