"""Metrics module for Prototype Builder service."""

from prometheus_client import Counter

# Counter to track how many times the generation API was called
llm_calls_total = Counter("llm_calls_total", "LLM calls counter", ["call_type"])

# Counter to track how many times the generation API call failed
llm_calls_failures_total = Counter(
    "llm_calls_failures_total", "LLM calls failures", ["call_type"]
)

# Counter to track how many times the generation API returned unparseable output
llm_calls_validation_errors_total = Counter(
    "llm_calls_validation_errors_total", "LLM validation errors", ["call_type"]
)

# Counters to track response cache efficiency
response_cache_hits_total = Counter(
    "response_cache_hits_total", "Response cache hits", ["cache"]
)

response_cache_misses_total = Counter(
    "response_cache_misses_total", "Response cache misses", ["cache"]
)
