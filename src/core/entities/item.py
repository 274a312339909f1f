"""Item domain entity."""

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """A single record of the item store."""

    # Unknown keys in the backing file survive a rewrite
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    category: str
    price: int | float  # ints stay ints on rewrite
