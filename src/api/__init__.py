"""
API Layer - Presentation

Responsibility:
    Boundary between external callers and the use cases.
    Exposes use case operations without adding logic.

Contains:
    - controllers/: In-process controllers (TaskController)

Does NOT contain:
    - Business logic (belongs to Application layer)
    - Storage operations (belongs to Infrastructure layer)
"""
