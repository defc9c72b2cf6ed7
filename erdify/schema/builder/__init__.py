from .schema_builder import build_schema

__all__ = ["build_schema"]
