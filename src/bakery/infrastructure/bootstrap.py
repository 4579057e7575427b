"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``BAKERY_DATA_DIR``: directory holding ``bakery.json`` (default:
  ``data/`` at the repository root)
- ``BAKERY_ENV`` / ``LOG_LEVEL``: see ``bakery.infrastructure.logging``
"""

from __future__ import annotations

import os
from pathlib import Path

from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_FILE_NAME = "bakery.json"


def data_dir() -> Path:
    configured = os.getenv("BAKERY_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def document_store() -> JsonDocumentStore:
    return JsonDocumentStore(data_dir() / DATA_FILE_NAME)


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(document_store())
