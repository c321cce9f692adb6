"""Domain layer - token lifecycle rules.

No dependencies on any framework or infrastructure.

Structure:
- entities/: TokenRecord
- enums/: TokenPurpose
- errors/: TokenError, IdentityError
- protocols/: ports implemented by infrastructure (store, identity, email, logging)
"""
