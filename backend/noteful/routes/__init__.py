# Routes package init
"""
Noteful Backend — API Routes Package
======================================

Route Inventory:
    - folders.py: GET/POST /folders, GET/PATCH/DELETE /folders/{id}
    - notes.py:   GET/POST /notes,   GET/PATCH/DELETE /notes/{id}
    - health.py:  GET /health

Routes are THIN: read the path id and JSON body, call the service, pick
the status code and headers. Errors travel as exceptions to the handlers
registered in main.py.
"""
