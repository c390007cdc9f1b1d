"""GraphQL building blocks: query errors, custom scalars, cache hints and sample resolvers."""

__version__ = "0.1.0"
__all__ = ["errors", "scalars", "cache", "caching", "customerrors", "social", "starwars"]