"""A small arcade game built from entities, components and rectangle physics."""

__version__ = "0.2.0"
__all__ = ["vector", "bodies", "components", "entities", "ai", "world"]