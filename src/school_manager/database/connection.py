from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


@dataclass
class FirebaseConfig:
    credentials_path: Optional[str]
    project_id: Optional[str]
    api_key: Optional[str]


class FirebaseConnection:
    """Singleton-like Firebase app holder.

    The Firebase app is initialized once per process; the Firestore client it
    hands out is thread-safe and shared by every repository.
    """

    _instance: Optional["FirebaseConnection"] = None

    def __init__(self, config: FirebaseConfig):
        self._config = config
        self._app = self._initialize(config)

    @classmethod
    def get_instance(cls, config: FirebaseConfig) -> "FirebaseConnection":
        if cls._instance is None:
            cls._instance = FirebaseConnection(config)
        return cls._instance

    @staticmethod
    def _initialize(config: FirebaseConfig) -> firebase_admin.App:
        try:
            app = firebase_admin.get_app()
            logger.info("Firebase already initialized")
            return app
        except ValueError:
            pass

        if config.credentials_path:
            cred = credentials.Certificate(config.credentials_path)
        else:
            cred = credentials.ApplicationDefault()

        options = {"projectId": config.project_id} if config.project_id else None
        try:
            app = firebase_admin.initialize_app(cred, options)
        except Exception:
            logger.exception("Failed to initialize Firebase")
            raise
        logger.info("Firebase initialized (project=%s)", config.project_id or "<from credentials>")
        return app

    @property
    def app(self) -> firebase_admin.App:
        return self._app

    @property
    def config(self) -> FirebaseConfig:
        return self._config

    def firestore(self):
        return firestore.client(self._app)
