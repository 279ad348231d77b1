# Routes package init
"""
ApisLabs Catalog API - API Routes Package
==========================================

Route Inventory:
    - books.py:   GET/POST /books, GET/PUT/DELETE /books/{id}
    - pets.py:    GET/POST /pets,  GET/PUT/DELETE /pets/{id}
    - health.py:  GET /health

Design Principle:
    Routes are THIN: decode the request, call the service, return the
    entity. Status codes for failures come from the global exception
    handlers, not from the routes.
"""
