"""Model with service configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
    PositiveFloat,
    PositiveInt,
    SecretStr,
)

from typing_extensions import Self, Literal

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class CORSConfiguration(ConfigurationBase):
    """CORS configuration.

    CORS or 'Cross-Origin Resource Sharing' refers to the situations when a
    frontend running in a browser has JavaScript code that communicates with a
    backend, and the backend is in a different 'origin' than the frontend. The
    chat and preview UI is usually served from a different origin than this
    service.

    Useful resources:

      - [CORS in FastAPI](https://fastapi.tiangolo.com/tutorial/cors/)
      - [Wikipedia article](https://en.wikipedia.org/wiki/Cross-origin_resource_sharing)
    """

    # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_origins: list[str] = Field(
        ["*"],
        title="Allow origins",
        description="A list of origins allowed for cross-origin requests. "
        "Use ['*'] to allow all origins.",
    )

    allow_credentials: bool = Field(
        False,
        title="Allow credentials",
        description="Indicate that cookies should be supported for cross-origin requests",
    )

    allow_methods: list[str] = Field(
        ["*"],
        title="Allow methods",
        description="A list of HTTP methods that should be allowed for "
        "cross-origin requests.",
    )

    allow_headers: list[str] = Field(
        ["*"],
        title="Allow headers",
        description="A list of HTTP request headers that should be supported "
        "for cross-origin requests.",
    )

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins in CORS
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains the '*' wildcard."
                "Use explicit origins or disable credentials."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration.

    Prototype Builder is a REST API service that accepts requests on a
    specified hostname and port. Note that the response cache lives in the
    process memory, so every Uvicorn worker keeps its own cache.
    """

    host: str = Field(
        "localhost",
        title="Host",
        description="Service hostname",
    )

    port: PositiveInt = Field(
        8080,
        title="Port",
        description="Service port",
    )

    workers: PositiveInt = Field(
        1,
        title="Number of workers",
        description="Number of Uvicorn worker processes to start",
    )

    color_log: bool = Field(
        True,
        title="Color log",
        description="Enables colorized logging",
    )

    access_log: bool = Field(
        True,
        title="Access log",
        description="Enables logging of all access information",
    )

    cors: CORSConfiguration = Field(
        default_factory=lambda: CORSConfiguration(
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        ),
        title="CORS configuration",
        description="Cross-Origin Resource Sharing configuration for cross-domain requests",
    )

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class LlamaStackConfiguration(ConfigurationBase):
    """Llama stack configuration.

    Generation requests are sent to the OpenAI-compatible chat completions
    API exposed by a Llama Stack service. The API key is the credential
    required for every generation request; when it is missing, generation
    fails before any network call is made.

    Useful resources:

      - [Llama Stack](https://www.llama.com/products/llama-stack/)
      - [Python Llama Stack client](https://github.com/llamastack/llama-stack-client-python)
    """

    url: str = Field(
        ...,
        title="Llama Stack URL",
        description="URL to Llama Stack service",
    )

    api_key: Optional[SecretStr] = Field(
        None,
        title="API key",
        description="API key to access Llama Stack service",
    )

    timeout: Optional[PositiveFloat] = Field(
        None,
        title="Request timeout",
        description="Timeout in seconds for a single call to the generation API. "
        "Client library defaults are used when not set.",
    )

    @property
    def credential_configured(self) -> bool:
        """Check if a non-empty API key is configured."""
        return self.api_key is not None and self.api_key.get_secret_value() != ""


class InferenceConfiguration(ConfigurationBase):
    """Inference configuration."""

    default_model: Optional[str] = Field(
        None,
        title="Default model",
        description="Identification of model used for generation requests.",
    )

    default_provider: Optional[str] = Field(
        None,
        title="Default provider",
        description="Identification of provider used for generation requests.",
    )

    @model_validator(mode="after")
    def check_default_model_and_provider(self) -> Self:
        """Check default model and provider."""
        if self.default_model is None and self.default_provider is not None:
            raise ValueError(
                "Default model must be specified when default provider is set"
            )
        if self.default_model is not None and self.default_provider is None:
            raise ValueError(
                "Default provider must be specified when default model is set"
            )
        return self

    @property
    def model_id(self) -> str:
        """Return model identifier in the form expected by Llama Stack."""
        if self.default_model is None or self.default_provider is None:
            return constants.DEFAULT_GENERATION_MODEL
        return f"{self.default_provider}/{self.default_model}"


class ResponseCacheConfiguration(ConfigurationBase):
    """Response cache configuration.

    Responses of the generation API are memoized for a short time so that
    repeated requests (retries, double submits) do not call the LLM again.
    Code generation results are kept longer than chat replies.
    """

    type: Literal["memory", "noop"] = Field(
        constants.CACHE_TYPE_MEMORY,
        title="Response cache type",
        description="Type of response cache. Use 'noop' to disable caching.",
    )

    code_generation_ttl: PositiveInt = Field(
        constants.DEFAULT_CODE_GENERATION_CACHE_TTL,
        title="Code generation TTL",
        description="Time-to-live of cached code generation results in seconds",
    )

    chat_reply_ttl: PositiveInt = Field(
        constants.DEFAULT_CHAT_REPLY_CACHE_TTL,
        title="Chat reply TTL",
        description="Time-to-live of cached chat replies in seconds",
    )

    sweep_interval: PositiveInt = Field(
        constants.DEFAULT_CACHE_SWEEP_INTERVAL,
        title="Sweep interval",
        description="Period in seconds of the background removal of expired entries",
    )

    max_entries: Optional[PositiveInt] = Field(
        None,
        title="Max entries",
        description="Maximum number of entries stored in one cache; "
        "the oldest entry is evicted when the limit is reached",
    )


class ContextConfiguration(ConfigurationBase):
    """Conversation context configuration.

    Controls how much of the conversation history is sent to the LLM and how
    the cache fingerprint of a request is built.
    """

    history_turns: PositiveInt = Field(
        constants.DEFAULT_HISTORY_TURNS,
        title="History turns",
        description="Number of most recent conversation turns sent to the LLM",
    )

    fingerprint_prompt_length: PositiveInt = Field(
        constants.DEFAULT_FINGERPRINT_PROMPT_LENGTH,
        title="Fingerprint prompt length",
        description="Number of prompt characters used in the cache fingerprint",
    )

    fingerprint_context_turns: PositiveInt = Field(
        constants.DEFAULT_FINGERPRINT_CONTEXT_TURNS,
        title="Fingerprint context turns",
        description="Number of most recent turns used in the cache fingerprint",
    )

    fingerprint_turn_length: PositiveInt = Field(
        constants.DEFAULT_FINGERPRINT_TURN_LENGTH,
        title="Fingerprint turn length",
        description="Number of characters of each turn used in the cache fingerprint",
    )

    @model_validator(mode="after")
    def check_context_configuration(self) -> Self:
        """Check context configuration."""
        if self.fingerprint_context_turns > self.history_turns:
            raise ValueError(
                "Fingerprint context turns can not exceed number of history turns"
            )
        return self


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = Field(
        ...,
        title="Service name",
        description="Name of the service. That value will be used in REST API endpoints.",
    )

    service: ServiceConfiguration = Field(
        ...,
        title="Service configuration",
        description="This section contains Prototype Builder service configuration.",
    )

    llama_stack: LlamaStackConfiguration = Field(
        ...,
        title="Llama Stack configuration",
        description="This section contains configuration of the generation API.",
    )

    inference: InferenceConfiguration = Field(
        default_factory=lambda: InferenceConfiguration(
            default_model=None, default_provider=None
        ),
        title="Inference configuration",
        description="Provider and model used for code generation and chat replies.",
    )

    response_cache: ResponseCacheConfiguration = Field(
        default_factory=ResponseCacheConfiguration,
        title="Response cache configuration",
        description="Configuration of the in-process cache of generation API responses.",
    )

    context: ContextConfiguration = Field(
        default_factory=ContextConfiguration,
        title="Context configuration",
        description="Configuration of conversation context sent to the generation API.",
    )

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
