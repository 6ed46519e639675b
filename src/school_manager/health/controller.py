from __future__ import annotations

import logging
import random

from flask import Flask

from ..common.responses import ok
from ..common.timestamps import Timestamp, format_timestamp
from ..container import Container
from ..core.constants import API_PREFIX

logger = logging.getLogger(__name__)

PROBE_COLLECTION = "test_collection"


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route(f"{API_PREFIX}/test/health", methods=["GET"], endpoint="health")
    def health():
        return ok(
            {
                "status": "UP",
                "message": "Backend is running!",
                "firebase": "CONNECTED" if store.health_check() else "DISCONNECTED",
            }
        )

    @app.route(f"{API_PREFIX}/test/firebase", methods=["GET"], endpoint="firebase_write_probe")
    def firebase_write_probe():
        logger.info("Testing Firebase connection...")
        probe = {
            "message": "Hello Firebase!",
            "timestamp": format_timestamp(Timestamp.now()),
            "status": "connected",
            "testNumber": random.random(),
        }
        doc_id = store.join(store.create(PROBE_COLLECTION, probe))
        logger.info("Firebase test successful, document ID: %s", doc_id)
        return ok(
            {"documentId": doc_id, "message": "Firebase connected successfully!", "collection": PROBE_COLLECTION},
            "Firebase working!",
        )

    @app.route(f"{API_PREFIX}/test/firebase/read", methods=["GET"], endpoint="firebase_read_probe")
    def firebase_read_probe():
        logger.info("Testing Firebase read operation...")
        documents = store.join(store.get_all(PROBE_COLLECTION))
        return ok(documents, f"Found {len(documents)} test documents")
