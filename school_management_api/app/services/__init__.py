"""
Service layer.

Services hold the business logic and receive the ``SchoolStore`` they
work on as an argument.
"""
