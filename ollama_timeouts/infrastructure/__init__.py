"""Infrastructure layer - ollama client adapters and configuration."""
