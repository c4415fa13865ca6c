"""
Application Modules.

- backend/: Notes service domain, use cases, API, database, configuration
"""
