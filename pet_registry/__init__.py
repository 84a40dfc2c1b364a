"""Pet registry backend: pet records and avatar uploads behind an async use-case layer."""
