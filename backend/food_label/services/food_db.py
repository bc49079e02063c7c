"""Client for the public food product database (식품원재료정보 API)."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from ..config import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductRecord:
    """Product as returned by the database, with field casing normalised."""
    product_name: Optional[str]
    manufacturer_name: Optional[str]
    report_number: Optional[str]
    raw_ingredient_text: Optional[str]


# Canonical attribute -> database field name. The API returns either the
# lower-case or the upper-case variant depending on the endpoint version.
RECORD_FIELDS = {
    "product_name": "prdlst_nm",
    "manufacturer_name": "bssh_nm",
    "report_number": "prdlst_report_no",
    "raw_ingredient_text": "rawmtrl_nm",
}


def _read_field(item: Mapping[str, Any], name: str) -> Optional[str]:
    """Read a field under either casing; empty values count as absent."""
    value = item.get(name) or item.get(name.upper())
    if value is None or value == "":
        return None
    return str(value)


def parse_product_record(item: Mapping[str, Any]) -> ProductRecord:
    """Normalise one raw result item into a ProductRecord."""
    return ProductRecord(**{
        attr: _read_field(item, field_name)
        for attr, field_name in RECORD_FIELDS.items()
    })


def first_item(payload: Any) -> Optional[Mapping[str, Any]]:
    """Return body.items[0] from a response payload, or None."""
    if not isinstance(payload, dict):
        return None
    body = payload.get("body")
    if not isinstance(body, dict):
        return None
    items = body.get("items")
    if not isinstance(items, list) or not items:
        return None
    item = items[0]
    return item if isinstance(item, Mapping) else None


class FoodDBClient:
    """Looks up products by name in the food product database."""
    
    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_url = api_url if api_url is not None else settings.food_db_api_url
        self.api_key = api_key if api_key is not None else settings.food_db_api_key
        self.timeout = timeout if timeout is not None else settings.food_db_timeout_seconds
        self.page_size = settings.food_db_page_size
        self.page_no = settings.food_db_page_no
    
    @property
    def is_configured(self) -> bool:
        """Whether both endpoint URL and service key are set."""
        return bool(self.api_url and self.api_key)
    
    def _build_params(self, product_name: str) -> Dict[str, Any]:
        return {
            "serviceKey": self.api_key,
            "prdlst_nm": product_name,
            "numOfRows": self.page_size,
            "pageNo": self.page_no,
            "type": "json",
        }
    
    def find_product(self, product_name: str) -> Optional[ProductRecord]:
        """
        Find the first product matching product_name.
        
        Never raises: network errors, timeouts, non-2xx responses and
        unexpected payloads are logged and reported as None.
        
        Args:
            product_name: Product name as read from the label
            
        Returns:
            ProductRecord for the first result, or None if not found
        """
        if not self.is_configured:
            logger.error("Food DB lookup skipped: FOOD_DB_API_URL or FOOD_DB_API_KEY not set")
            return None
        
        logger.info(f'Searching food DB for "{product_name}"')
        
        try:
            response = requests.get(
                self.api_url,
                params=self._build_params(product_name),
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"Food DB search failed with status {status}: {e}")
            return None
        except requests.RequestException as e:
            logger.error(f"Food DB search failed: {e}")
            return None
        except ValueError as e:
            logger.error(f"Food DB returned invalid JSON: {e}")
            return None
        
        logger.debug(f"Food DB response: {payload}")
        
        item = first_item(payload)
        if item is None:
            logger.info(f'No food DB result for "{product_name}"')
            return None
        
        return parse_product_record(item)
