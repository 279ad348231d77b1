# Services package init
"""
ApisLabs Catalog API - Services Layer
======================================

What:  Business rules sitting between routes (HTTP) and the repository.

Service Inventory:
    - validation:    creation-time gate (first failing reason wins)
    - identity:      book-<n> and UUID identifier strategies
    - merge:         data-driven partial update engine
    - BookService:   create / get / list / update / delete for books
    - PetService:    the same for pets

validation, identity and merge are pure modules with no I/O; the two
entity services are the only callers of the repository.
"""
