# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notekeeper.app import create_app
from notekeeper.container import Container
from notekeeper.shared.config import AppConfig


def main(config: AppConfig | None = None) -> None:
    app = create_app(config)
    container: Container = app.extensions["notekeeper"]
    try:
        app.run(host="0.0.0.0", port=5000)
    finally:
        container.close()


if __name__ == "__main__":
    main()
