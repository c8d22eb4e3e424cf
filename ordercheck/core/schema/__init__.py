from .builder import CategorySchema, build_schema, build_schemas

__all__ = ["CategorySchema", "build_schema", "build_schemas"]
