"""
Photo API: API Routes Package
=============================

Route Inventory:
    - photos.py:  /api/photos            (create, list)
                  /api/photos/{id}       (get, update, replace, delete)
                  /api/photos/fake       (fake record, fake_router)
    - health.py:  GET /health            (service health check)

Routes stay thin: read the request, call PhotoService, pick the status code.
"""
