"""Local publish demo — push a build artifact to the filesystem store.

Usage:
    python examples/local_publish_demo.py
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from bucketpush.core.context import PushContext
from bucketpush.publishers import default_registry
from bucketpush.runtime.inputs import PushInputs
from bucketpush.runtime.source import SourceLocation
from bucketpush.runtime.ui import ConsoleUI
from bucketpush.settings import StoreSettings


def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)

        # 1. Fake an earlier build phase
        build_dir = root / "build"
        build_dir.mkdir()
        (build_dir / "server.zip").write_bytes(b"PK\x03\x04 demo archive")

        # 2. Bind configuration once
        settings = StoreSettings(backend="local", local_root=str(root / "objects"))
        publisher = default_registry().create("objectstore", settings)
        publisher.config_set({"source": "server.zip", "name": "build-42.zip", "bucket": "my-bucket"})

        # 3. Push with the inputs a host pipeline would bind
        artifact = publisher.push(
            PushInputs(
                context=PushContext(timeout=30),
                source=SourceLocation(path=str(build_dir)),
                ui=ConsoleUI(),
            )
        )
        print(f"Artifact: {artifact.model_dump_json()}")


if __name__ == "__main__":
    main()
