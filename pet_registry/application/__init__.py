"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): register, update, delete, avatar presign/confirm
- queries/   → Read operations (CQRS): get pet, list pets
- dto/       → Response DTOs
- common/    → Shared interfaces (Command, Query base classes, Validated)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and gateways
"""
