"""
Domain layer for contact submission business logic.

This layer contains:
- Data models (type-safe structures)
- Validation and notification composition
- Business logic (submission pipeline)
- Result types (explicit success/failure handling)
"""
