from .redis_client import RedisVectorStore, vector_to_bytes, escape_tag_value

__all__ = ["RedisVectorStore", "vector_to_bytes", "escape_tag_value"]
