"""School Manager package.

This package is organized by feature modules (students, parents, trips, ...)
with a thin Flask controller layer and service/repository layers over Firestore.
"""
