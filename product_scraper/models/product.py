"""
Product models for the Product Scraper service.

ProductDraft is the record while extraction stages are still filling it;
ProductExtraction is the frozen result handed back to callers.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of product categories."""
    SHIRTS = "shirts"
    PANTS = "pants"
    SHOES = "shoes"
    OUTERWEAR = "outerwear"
    ACCESSORIES = "accessories"
    OTHER = "other"


PRODUCT_FIELDS = ("name", "brand", "price", "sale_price", "currency", "image_url", "category")


class ProductExtraction(BaseModel):
    """
    Scraped product metadata.
    
    Every field is optional except category and currency, which the pipeline
    always populates. Serialized with the camelCase keys the front-end expects.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    name: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    sale_price: Optional[float] = Field(default=None, ge=0, alias="salePrice")
    currency: str = "USD"
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    category: Category = Category.OTHER


class ProductDraft(BaseModel):
    """
    Mutable product record used while the pipeline runs.
    
    Fields are only ever written through fill(), which refuses to overwrite
    a field an earlier (higher-priority) source already populated.
    """
    name: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[float] = None
    sale_price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[Category] = None
    
    # field name -> source that filled it
    sources: Dict[str, str] = Field(default_factory=dict)
    
    def is_set(self, field: str) -> bool:
        """
        A field counts as set when it holds anything but None or an empty string.
        
        A zero price also counts as unset: it is a placeholder on many pages,
        so a later source may still supply the real price.
        """
        value = getattr(self, field)
        if field == "price" and value == 0:
            return False
        return value is not None and value != ""
    
    def fill(self, field: str, value: Any, source: str) -> bool:
        """
        Set a field only if it is still unset.
        
        Returns True when the value was written.
        """
        if field not in PRODUCT_FIELDS:
            raise KeyError(f"Unknown product field: {field}")
        if self.is_set(field):
            return False
        if value is None or value == "":
            return False
        setattr(self, field, value)
        self.sources[field] = source
        return True
    
    def get_present_fields(self) -> List[str]:
        """Return list of populated product fields."""
        return [f for f in PRODUCT_FIELDS if self.is_set(f)]
    
    def get_missing_fields(self) -> List[str]:
        """Return list of product fields still unset."""
        return [f for f in PRODUCT_FIELDS if not self.is_set(f)]
    
    def to_extraction(self) -> ProductExtraction:
        """Freeze the draft into the returned record."""
        return ProductExtraction(
            name=self.name,
            brand=self.brand,
            price=self.price,
            sale_price=self.sale_price,
            currency=self.currency or "USD",
            image_url=self.image_url,
            category=self.category or Category.OTHER,
        )
