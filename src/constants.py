"""Constants used in business logic."""

from typing import Final

# Response cache types
CACHE_TYPE_MEMORY: Final[str] = "memory"
CACHE_TYPE_NOOP: Final[str] = "noop"

# Time-to-live for cached responses, in seconds
DEFAULT_CODE_GENERATION_CACHE_TTL: Final[int] = 5 * 60
DEFAULT_CHAT_REPLY_CACHE_TTL: Final[int] = 2 * 60

# Period of the background sweep of expired cache entries, in seconds
DEFAULT_CACHE_SWEEP_INTERVAL: Final[int] = 5 * 60

# Number of most recent conversation turns sent to the LLM
DEFAULT_HISTORY_TURNS: Final[int] = 10

# Fingerprint (cache key) construction
DEFAULT_FINGERPRINT_PROMPT_LENGTH: Final[int] = 200
DEFAULT_FINGERPRINT_CONTEXT_TURNS: Final[int] = 3
DEFAULT_FINGERPRINT_TURN_LENGTH: Final[int] = 100
FINGERPRINT_ARTIFACT_DIGEST_LENGTH: Final[int] = 16
FINGERPRINT_NO_ARTIFACT_MARKER: Final[str] = "artifact:none"

# Model used when inference configuration does not select one
DEFAULT_GENERATION_MODEL: Final[str] = "openai/gpt-4o"

# Sampling parameters; modifications are kept conservative
MODIFICATION_TEMPERATURE: Final[float] = 0.1
FRESH_GENERATION_TEMPERATURE: Final[float] = 0.7
CHAT_REPLY_TEMPERATURE: Final[float] = 0.7

# Output token budgets
CODE_GENERATION_MAX_OUTPUT_TOKENS: Final[int] = 2000
CHAT_REPLY_MAX_OUTPUT_TOKENS: Final[int] = 200

# Default configuration file
DEFAULT_CONFIGURATION_FILE: Final[str] = "prototype-builder.yaml"

# Environment variable holding path to configuration file; each Uvicorn
# worker process loads the configuration from it
CONFIGURATION_PATH_ENV_VAR: Final[str] = "PROTOTYPE_BUILDER_CONFIG_PATH"
