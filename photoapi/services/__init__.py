"""
Photo API: Services Layer
=========================

Service Inventory:
    - PhotoService: photo CRUD and payload validation (the data-access layer)
    - FakePhotoFactory: Faker-backed generator for sample photo payloads
"""
