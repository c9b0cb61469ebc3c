"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Initiating a payment and delivering its result
- Ports: Abstract interfaces for the host platform, storage, locking and time
- Request/response DTOs, defined next to the use case that consumes them

The application layer depends only on the domain layer.
Host and infrastructure implementations are injected via ports.
"""
