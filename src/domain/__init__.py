"""Domain layer - Pure business logic.

This layer contains the business entities, protocols (ports), and
validators. The domain layer has NO dependencies on any framework or
infrastructure.

Structure:
- entities/: Domain entities (UserProfile, Product, IdentityUser)
- protocols/: Repository and service interfaces
- validators/: Rule sets producing field-level errors

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
