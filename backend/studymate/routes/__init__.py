"""
StudyMate Backend — API Routes Package
=========================================

Route Inventory:
    - health.py:    GET /  (liveness text), GET /health (MongoDB ping)
    - partners.py:  /api/partners ... listing, top-N, CRUD, increment, request
    - requests.py:  /api/requests ... per-requester listing, update, delete

Routes stay thin: read path/query/body, call a service with the injected
store, return what the service returns.
"""
