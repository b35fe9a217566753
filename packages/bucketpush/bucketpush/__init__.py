"""bucketpush — publish build artifacts to object storage buckets."""

__version__ = "1.0.0"
