from erdify.services.schema_service import parse_schema_service

__all__ = [
    "parse_schema_service",
]
