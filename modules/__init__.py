"""
Application Modules.

- backend/: Seat viewer service - API, persistence, configuration
"""
