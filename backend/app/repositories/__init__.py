"""
Repositories package: data-access layer.

Repositories do NOT handle HTTP concerns or request validation; records
reach them already decoded.

Convention:
    - All functions accept the `RecordStore` as the first argument
    - Lookups that miss raise `RecordNotFoundError`, inserts that collide
      raise `RecordConflictError`; the API layer maps these to 404 / 409
"""
