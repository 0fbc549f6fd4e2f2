"""
notekeeper.

Note record service with a JSON file store.

- core/: Configuration, logging, storage, validation, error handling
- models/: Persisted record models
- schemas/: API request/response schemas
- repositories/: Note collection operations (list, get, create, update, delete)
- api/: FastAPI routers
"""
