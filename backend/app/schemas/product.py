from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Товар каталога"""
    id: int
    product_code: str = Field(alias="productCode")
    name: str

    class Config:
        populate_by_name = True
