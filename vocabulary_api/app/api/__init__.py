"""
API package containing versioned routes and shared dependencies.

Each version subpackage (``v1``) exposes a top-level ``router`` which
includes its domain endpoints.  ``deps`` provides the service
instances the endpoints depend on.
"""
