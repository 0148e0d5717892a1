"""
lumen_store — Hello World

Open a file-backed store, write a few variables (one with a TTL), and read
them back through a namespace.
"""

import logging
import tempfile
import time
from pathlib import Path

from lumen_store import KeyNotFoundError, NamespacedStore, StoreConfig, open_store_from_config


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s %(message)s")

    with tempfile.TemporaryDirectory() as tmp:
        # ──────────────────────────────────────
        #  1. Pick a driver ("file:<path>")
        # ──────────────────────────────────────
        config = StoreConfig.parse(f"file:{Path(tmp) / 'lumen-data.yml'}")
        store = open_store_from_config(config)

        # ──────────────────────────────────────
        #  2. Namespaced variables
        # ──────────────────────────────────────
        vars_ = NamespacedStore(store, "default")
        vars_.set_var("config:network", "test")
        vars_.set_var("session", "abc123", ttl=1)

        print("network:", vars_.get_var("config:network"))
        print("session:", vars_.get_var("session"))

        # ──────────────────────────────────────
        #  3. Let the session expire
        # ──────────────────────────────────────
        time.sleep(1.1)
        try:
            vars_.get_var("session")
        except KeyNotFoundError as e:
            print("session:", e)

        print("on disk:", Path(config.parameters).read_text())


if __name__ == "__main__":
    main()
