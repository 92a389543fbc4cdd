"""MongoDB repository for loading the menu catalog."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pymongo import MongoClient

from ..utils.config import Config
from ..utils.logging import get_logger
from .menu import ItemType, MenuCatalog, MenuItem

logger = get_logger(__name__)


class MenuRepository:
    def __init__(
        self,
        url: Optional[str] = None,
        db_name: Optional[str] = None,
        collection: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> None:
        config = config or Config(".env")
        self._url = url or config.get("mongo_url")
        self._db = db_name or config.get("mongo_db")
        self._collection = collection or config.get("mongo_collection")
        if not self._url:
            raise ValueError("MENU_DB_CONNECTION_URL is required")
        self._client: Optional[MongoClient] = None

    def __enter__(self) -> "MenuRepository":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def connect(self) -> None:
        if self._client is None:
            self._client = MongoClient(self._url, serverSelectionTimeoutMS=5000)

    def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch_menu_documents(self) -> List[Dict[str, Any]]:
        if self._client is None:
            self.connect()
        coll = self._client[self._db][self._collection]
        return list(coll.find({}, {"_id": 0}))

    def load_catalog(self) -> MenuCatalog:
        """Read every menu document and build a catalog from them."""
        items = []
        for doc in self.fetch_menu_documents():
            item = _item_from_document(doc)
            if item is not None:
                items.append(item)
        logger.info(f"Loaded {len(items)} menu items from {self._db}.{self._collection}")
        return MenuCatalog.from_items(items)


def _item_from_document(doc: Dict[str, Any]) -> Optional[MenuItem]:
    name = doc.get("name")
    price = doc.get("price")
    if not name or price is None:
        logger.warning(f"Skipping menu document without name or price: {doc}")
        return None

    raw_type = doc.get("type")
    item_type = None
    if raw_type:
        try:
            item_type = ItemType(str(raw_type).lower())
        except ValueError:
            raise ValueError(f"Unknown menu item type '{raw_type}' for '{name}'") from None

    return MenuItem(
        name=str(name),
        price=float(price),
        label=str(doc.get("label") or ""),
        description=str(doc.get("description") or ""),
        type=item_type,
    )
