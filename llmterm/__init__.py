"""Generate shell commands from plain-language prompts with OpenAI or Ollama models."""

__version__ = "0.1.0"

__all__ = ["cli", "model", "shell", "storage"]