"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Result dataclasses returned to the presentation layer
- messages.py: User-facing success and failure messages

The application layer orchestrates domain logic but contains no business rules.
"""
