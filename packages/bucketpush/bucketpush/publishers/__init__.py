"""bucketpush publishers — capability interface, registry and the object store publisher."""

from bucketpush.publishers.base import BasePublisher
from bucketpush.publishers.objectstore import ObjectStorePublisher
from bucketpush.publishers.registry import PublisherFactory, PublisherRegistry


def default_registry() -> PublisherRegistry:
    """Registry holding every built-in publisher."""
    registry = PublisherRegistry()
    registry.register("objectstore", ObjectStorePublisher, backends=("s3", "local"))
    return registry


__all__ = [
    "BasePublisher",
    "ObjectStorePublisher",
    "PublisherFactory",
    "PublisherRegistry",
    "default_registry",
]
