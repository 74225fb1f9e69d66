"""Domain records and pandera schemas for the sales batch."""

from dataclasses import dataclass, field

from pandera import Column, Check, DataFrameSchema

from salesbatch.utils.types import DocumentType

type ProductID = str
type DocumentNumber = int
type SalePair = tuple[ProductID, int]


@dataclass
class SellerRecord:
    document_type: DocumentType
    document_number: DocumentNumber
    first_names: str
    last_names: str
    accumulated_revenue: float = 0.0

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.last_names}"


@dataclass
class ProductRecord:
    product_id: ProductID
    display_name: str
    unit_price: float
    units_sold: int = 0


@dataclass(frozen=True)
class SalesTransactionGroup:
    """The (product, quantity) pairs parsed from one sales line."""

    line: int
    pairs: tuple[SalePair, ...] = field(default_factory=tuple)


# Seller report frame, before renaming to the output headers
SELLER_REPORT_SCHEMA = DataFrameSchema(
    columns={
        "first_names": Column(str),
        "last_names": Column(str),
        "accumulated_revenue": Column(float, Check.ge(0)),
    },
    strict=True,
    ordered=True,
    coerce=True,
)

PRODUCT_REPORT_SCHEMA = DataFrameSchema(
    columns={
        "display_name": Column(str),
        "unit_price": Column(float, Check.ge(0)),
        "units_sold": Column(int, Check.ge(0)),
    },
    strict=True,
    ordered=True,
    coerce=True,
)

SELLER_REPORT_HEADERS = {
    "first_names": "NombresVendedor",
    "last_names": "ApellidosVendedor",
    "accumulated_revenue": "TotalRecaudado",
}

PRODUCT_REPORT_HEADERS = {
    "display_name": "NombreProducto",
    "unit_price": "PrecioUnitario",
    "units_sold": "CantidadVendida",
}
