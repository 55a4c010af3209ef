"""
API package containing the HTTP routes.

``router`` exposes a top-level ``APIRouter`` which includes all of the
domain-specific endpoints defined in ``endpoints``.
"""
