"""LLM integration layer.

This package is intentionally small:
- A fixed Groq endpoint and model; only the API key comes from configuration.
- No prompt/output logging.
- Treated as a pure/stateless function by callers.
"""
