"""Store service dependency container."""

from .container import StoreContainer, build_store_container

__all__ = ["StoreContainer", "build_store_container"]
