"""Generation service producing prototypes and chat replies."""

import logging
from typing import Any, Callable, Optional

from llama_stack_client import (  # type: ignore
    APIConnectionError,
    APIError,
    AsyncLlamaStackClient,
)

import constants
import metrics
from cache.cache import ResponseCache
from generation.context_assembler import ContextAssembler
from generation.errors import ConfigurationError, UpstreamError
from generation.parsing import (
    parse_chat_reply,
    parse_generation_result,
    response_content,
)
from models.generation import AssembledContext, ConversationTurn, GenerationResult
from storage.conversation_store import ConversationStore

logger = logging.getLogger(__name__)

GENERATE_CALL = "generate"
CHAT_CALL = "chat"


class GenerationService:  # pylint: disable=too-many-instance-attributes
    """Produces prototypes and chat replies through the generation API.

    Every call runs the same pipeline: credential check, read of history
    (and for code generation the current prototype) from the conversation
    store, context assembly, cache lookup and, on a miss, one call to the
    generation API whose validated result is cached. Failed calls are never
    cached and are never retried.
    """

    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        client_provider: Callable[[], AsyncLlamaStackClient],
        artifact_cache: ResponseCache[GenerationResult],
        chat_cache: ResponseCache[str],
        store: ConversationStore,
        assembler: ContextAssembler,
        credential_configured: bool,
        model_id: str = constants.DEFAULT_GENERATION_MODEL,
        code_generation_ttl: float = constants.DEFAULT_CODE_GENERATION_CACHE_TTL,
        chat_reply_ttl: float = constants.DEFAULT_CHAT_REPLY_CACHE_TTL,
    ) -> None:
        """Initialize the service with its collaborators.

        Parameters:
            client_provider: Returns the client used to call the generation API.
            artifact_cache: Cache of generated prototypes.
            chat_cache: Cache of chat replies.
            store: Source of conversation history and current prototype.
            assembler: Builds messages and fingerprints.
            credential_configured: Whether an API key for the generation API is set.
            model_id: Identifier of the model used for all calls.
            code_generation_ttl: Time-to-live of cached prototypes in seconds.
            chat_reply_ttl: Time-to-live of cached chat replies in seconds.
        """
        self._client_provider = client_provider
        self.artifact_cache = artifact_cache
        self.chat_cache = chat_cache
        self.store = store
        self.assembler = assembler
        self.credential_configured = credential_configured
        self.model_id = model_id
        self.code_generation_ttl = code_generation_ttl
        self.chat_reply_ttl = chat_reply_ttl

    def _check_credential(self) -> None:
        if not self.credential_configured:
            raise ConfigurationError("API key for the generation API is not configured")

    async def generate_artifact(
        self, prompt: str, conversation_id: Optional[str] = None
    ) -> GenerationResult:
        """Generate a new prototype or modify the current one.

        Parameters:
            prompt (str): The user prompt, non-empty.
            conversation_id (Optional[str]): Conversation the prompt belongs to.

        Returns:
            GenerationResult: Freshly generated or cached prototype.

        Raises:
            ConfigurationError: The API credential is not configured.
            UpstreamError: The API call failed or its reply is malformed.
        """
        self._check_credential()

        history: list[ConversationTurn] = []
        current_artifact: Optional[str] = None
        if conversation_id is not None:
            history = await self.store.get_recent_turns(
                conversation_id, self.assembler.config.history_turns
            )
            current_artifact = await self.store.get_current_artifact(conversation_id)

        request = self.assembler.build_generation_request(
            prompt, history, current_artifact
        )
        context = self.assembler.assemble_generation(request)
        logger.debug(
            "Code generation request of kind %s with %d history turns",
            request.kind,
            len(request.history),
        )

        cached = self.artifact_cache.lookup(context.fingerprint)
        if cached is not None:
            logger.info("Returning cached prototype")
            return cached

        response = await self._complete(
            GENERATE_CALL, context, response_format={"type": "json_object"}
        )
        result = parse_generation_result(response_content(response))

        self.artifact_cache.store(
            context.fingerprint, result, self.code_generation_ttl
        )
        return result

    async def generate_chat_reply(
        self, prompt: str, conversation_id: Optional[str] = None
    ) -> str:
        """Generate short conversational reply of the assistant.

        Parameters:
            prompt (str): The user prompt, non-empty.
            conversation_id (Optional[str]): Conversation the prompt belongs to.

        Returns:
            str: Freshly generated or cached reply.

        Raises:
            ConfigurationError: The API credential is not configured.
            UpstreamError: The API call failed or returned an empty reply.
        """
        self._check_credential()

        history: list[ConversationTurn] = []
        if conversation_id is not None:
            history = await self.store.get_recent_turns(
                conversation_id, self.assembler.config.history_turns
            )

        request = self.assembler.build_chat_request(prompt, history)
        context = self.assembler.assemble_chat(request)

        cached = self.chat_cache.lookup(context.fingerprint)
        if cached is not None:
            logger.info("Returning cached chat reply")
            return cached

        response = await self._complete(CHAT_CALL, context)
        reply = parse_chat_reply(response_content(response))

        self.chat_cache.store(context.fingerprint, reply, self.chat_reply_ttl)
        return reply

    async def _complete(
        self, call_type: str, context: AssembledContext, **kwargs: Any
    ) -> Any:
        """Call chat completions of the generation API once."""
        client = self._client_provider()
        metrics.llm_calls_total.labels(call_type).inc()
        try:
            return await client.chat.completions.create(
                model=self.model_id,
                messages=context.messages,
                temperature=context.temperature,
                max_tokens=context.max_output_tokens,
                stream=False,
                **kwargs,
            )
        except APIConnectionError as e:
            metrics.llm_calls_failures_total.labels(call_type).inc()
            logger.error("Unable to connect to the generation API: %s", e)
            raise UpstreamError(
                "Unable to connect to the generation API",
                str(e),
                connection_failed=True,
            ) from e
        except APIError as e:
            metrics.llm_calls_failures_total.labels(call_type).inc()
            logger.exception("Generation API call failed: %s", e)
            raise UpstreamError("Generation API call failed", str(e)) from e
