"""
COMMANDS - Write operations (CQRS)

Subfolders:
- pets/ → register, update, delete, avatar presign, avatar confirm
"""
