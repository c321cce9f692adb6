"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: Token stores (Firestore, Redis, in-memory)
- identity/: Firebase Auth identity provider
- security/: One-time code generation
- email/: Token email notifier
- logging/: structlog console adapter
- jobs/: Expired token sweep

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
