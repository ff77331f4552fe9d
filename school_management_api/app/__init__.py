"""
Application package.

``main`` builds the FastAPI app, ``api`` holds the routes, ``services``
the business logic, ``schemas`` the request/response models and
``core`` configuration, logging, errors and the school store.
"""
