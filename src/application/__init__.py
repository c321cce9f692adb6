"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (issue, validate, reset)
- dtos/: Results returned inside Success(...)
- services/: TokenLifecycleManager and the actions a token can authorize

The application layer orchestrates domain logic and depends only on
domain protocols.
"""
