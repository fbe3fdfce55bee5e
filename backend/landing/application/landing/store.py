"""
Persistent store for landing page documents.

The store treats a configuration as opaque JSON keyed by tenant; it
enforces no schema. Reconciliation with template defaults happens on
load, in the domain layer.
"""
from abc import ABC, abstractmethod
from copy import deepcopy
from datetime import datetime
from typing import Any, Dict, Optional

from flask import current_app

from landing.extensions import db
from landing.models.landing_page import LandingPage
from landing.utils.transaction import transactional

Document = Dict[str, Any]


class PageConfigStore(ABC):
    @abstractmethod
    def get(self, tenant_key: str) -> Optional[Document]:
        """Stored (possibly partial) document, or None."""

    @abstractmethod
    def put(self, tenant_key: str, document: Document) -> Document:
        """Persist `document` for the tenant and return what was stored."""

    def last_modified(self, tenant_key: str) -> Optional[datetime]:
        return None


class SqlPageConfigStore(PageConfigStore):
    """One JSON document per tenant in the `landing_pages` table."""

    def _row(self, tenant_key: str) -> Optional[LandingPage]:
        return LandingPage.query.filter_by(tenant_id=tenant_key).first()

    def get(self, tenant_key: str) -> Optional[Document]:
        row = self._row(tenant_key)
        if row is None or row.config is None:
            return None
        return deepcopy(row.config)

    def put(self, tenant_key: str, document: Document) -> Document:
        with transactional("landing page save"):
            row = self._row(tenant_key)
            if row is None:
                row = LandingPage()
                row.tenant_id = tenant_key
                db.session.add(row)

            row.config = deepcopy(document)

        return deepcopy(document)

    def last_modified(self, tenant_key: str) -> Optional[datetime]:
        row = self._row(tenant_key)
        return row.updated_at if row is not None else None


class InMemoryPageConfigStore(PageConfigStore):
    """Process-local store for embedding the engine without a database."""

    def __init__(self):
        self._documents: Dict[str, Document] = {}

    def get(self, tenant_key: str) -> Optional[Document]:
        document = self._documents.get(tenant_key)
        return deepcopy(document) if document is not None else None

    def put(self, tenant_key: str, document: Document) -> Document:
        self._documents[tenant_key] = deepcopy(document)
        return deepcopy(document)


def get_store() -> PageConfigStore:
    """Store registered on the app by `create_app`."""
    return current_app.extensions["landing_store"]
