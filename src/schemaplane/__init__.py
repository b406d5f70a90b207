"""SchemaPlane - Prisma schema toolkit."""

__version__ = "0.1.0"
