"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Pet record storage (Prisma over PostgreSQL, in-memory)
- storage/: Avatar objects in S3 (boto3)
"""
