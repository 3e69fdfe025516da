"""Configuration loader."""

import logging
from typing import Any, Optional

# We want to support environment variable replacement in the configuration
# similarly to how it is done in llama-stack, so we use their function directly
from llama_stack.core.stack import replace_env_vars

import yaml
from models.config import (
    Configuration,
    ContextConfiguration,
    InferenceConfiguration,
    LlamaStackConfiguration,
    ResponseCacheConfiguration,
    ServiceConfiguration,
)
from models.generation import GenerationResult

from cache.cache import ResponseCache
from cache.cache_factory import CacheFactory

from client import AsyncLlamaStackClientHolder
from generation.context_assembler import ContextAssembler
from generation.service import GenerationService
from storage import ConversationStore, InMemoryConversationStore

logger = logging.getLogger(__name__)

ARTIFACT_CACHE_NAME = "artifact"
CHAT_REPLY_CACHE_NAME = "chat"


class LogicError(Exception):
    """Error in application logic."""


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance.

        Sets placeholders for the loaded configuration and lazily-created
        runtime resources (response caches, conversation store and
        generation service).
        """
        self._configuration: Optional[Configuration] = None
        self._artifact_cache: Optional[ResponseCache[GenerationResult]] = None
        self._chat_reply_cache: Optional[ResponseCache[str]] = None
        self._conversation_store: Optional[ConversationStore] = None
        self._generation_service: Optional[GenerationService] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file.

        Parameters:
            filename (str): Path to the YAML configuration file to load.
        """
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin)
            config_dict = replace_env_vars(config_dict)
            self.init_from_dict(config_dict)
            # the API key is never logged
            logger.info("Loaded configuration of service %s", self.configuration.name)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary.

        Parameters:
            config_dict (dict[Any, Any]): Mapping of configuration values
            (typically parsed from YAML). Runtime resources built from the
            previous configuration are dropped so they will be recreated on
            next access.
        """
        # clear cached values when configuration changes
        self._artifact_cache = None
        self._chat_reply_cache = None
        self._conversation_store = None
        self._generation_service = None
        # now it is possible to re-read configuration
        self._configuration = Configuration(**config_dict)

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        return self.configuration.service

    @property
    def llama_stack_configuration(self) -> LlamaStackConfiguration:
        """Return Llama stack configuration."""
        return self.configuration.llama_stack

    @property
    def inference(self) -> InferenceConfiguration:
        """Return inference configuration."""
        return self.configuration.inference

    @property
    def response_cache_configuration(self) -> ResponseCacheConfiguration:
        """Return response cache configuration."""
        return self.configuration.response_cache

    @property
    def context_configuration(self) -> ContextConfiguration:
        """Return conversation context configuration."""
        return self.configuration.context

    @property
    def artifact_cache(self) -> ResponseCache[GenerationResult]:
        """Return cache of generated prototypes.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._artifact_cache is None:
            self._artifact_cache = CacheFactory.response_cache(
                self.response_cache_configuration, ARTIFACT_CACHE_NAME
            )
        return self._artifact_cache

    @property
    def chat_reply_cache(self) -> ResponseCache[str]:
        """Return cache of chat replies.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._chat_reply_cache is None:
            self._chat_reply_cache = CacheFactory.response_cache(
                self.response_cache_configuration, CHAT_REPLY_CACHE_NAME
            )
        return self._chat_reply_cache

    @property
    def conversation_store(self) -> ConversationStore:
        """Return source of conversation history and current prototypes."""
        if self._conversation_store is None:
            self._conversation_store = InMemoryConversationStore()
        return self._conversation_store

    @conversation_store.setter
    def conversation_store(self, store: ConversationStore) -> None:
        """Plug in conversation store provided by the persistence layer."""
        self._conversation_store = store
        self._generation_service = None

    @property
    def generation_service(self) -> GenerationService:
        """Return the generation service wired with caches and stores.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._generation_service is None:
            config = self.configuration
            self._generation_service = GenerationService(
                client_provider=AsyncLlamaStackClientHolder().get_client,
                artifact_cache=self.artifact_cache,
                chat_cache=self.chat_reply_cache,
                store=self.conversation_store,
                assembler=ContextAssembler(config.context),
                credential_configured=config.llama_stack.credential_configured,
                model_id=config.inference.model_id,
                code_generation_ttl=config.response_cache.code_generation_ttl,
                chat_reply_ttl=config.response_cache.chat_reply_ttl,
            )
        return self._generation_service


configuration: AppConfig = AppConfig()
