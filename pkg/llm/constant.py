# LLM Defaults
DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TIMEOUT_SECONDS = 120.0

# Error Messages
ERROR_API_KEY_EMPTY = "api_key is required"
ERROR_MODEL_EMPTY = "model cannot be empty"
ERROR_MAX_TOKENS_POSITIVE = "max_tokens must be > 0"
ERROR_TIMEOUT_POSITIVE = "timeout_seconds must be > 0"
ERROR_EMPTY_RESPONSE = "model returned no text content"
