"""
Shared infrastructure for Founder Pulse.

- ai: text completion providers (Groq via the OpenAI-compatible API, Claude, OpenAI)
- config: environment-backed base settings
- database: motor client lifecycle
- utils: HTTP-mapped exceptions
"""
