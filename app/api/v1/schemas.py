from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities.inventory import StockStatus
from app.domain.entities.order import OrderStatus
from app.domain.entities.sale import PaymentMethod


class PriceEntrySchema(BaseModel):
    price: float
    commission: float
    coupon_commission: float | None = None


class ServiceSchema(BaseModel):
    id: str
    name: str
    needs_size: bool
    has_coupon: bool
    wax_eligible: bool
    order: int
    prices: dict[str, PriceEntrySchema | None]


class PriceEntryUpdateSchema(BaseModel):
    price: float | None = Field(None, ge=0)
    commission: float | None = Field(None, ge=0)
    coupon_commission: float | None = Field(None, ge=0)
    clear_coupon: bool = False


class ServiceFlagsUpdateSchema(BaseModel):
    has_coupon: bool | None = None
    wax_eligible: bool | None = None


class SizeOptionSchema(BaseModel):
    key: str
    label: str
    price: float


class ServiceOptionsSchema(BaseModel):
    service_id: str
    sizes: list[SizeOptionSchema]
    payment_methods: list[PaymentMethod]
    wax_add_on: bool
    wax_add_on_price: float | None = None


class SeedResponseSchema(BaseModel):
    seeded: list[str]


class SaleRequestSchema(BaseModel):
    service_id: str | None = None
    car_size: str | None = None
    payment_method: PaymentMethod | None = None
    wax_add_on: bool = False


class RecordSaleRequestSchema(SaleRequestSchema):
    staff_id: str | None = None


class SaleQuoteSchema(BaseModel):
    complete: bool
    amount: float | None = None
    commission: float | None = None
    display_amount: str | None = None
    display_commission: str | None = None
    has_coupon: bool = False
    wax_add_on: bool = False
    is_paid: bool = True


class SaleRecordSchema(BaseModel):
    id: str | None
    service: str
    staff_name: str
    car_size: str | None = None
    date: str
    amount: float
    commission: float
    payment_method: str | None
    has_coupon: bool
    wax_add_on: bool
    is_paid: bool


class InventoryItemCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    category: str = ""
    quantity: int = Field(0, ge=0)
    purchase_price: float = Field(0.0, ge=0)
    location: str | None = None


class InventoryItemUpdateSchema(BaseModel):
    name: str | None = None
    category: str | None = None
    quantity: int | None = Field(None, ge=0)
    purchase_price: float | None = Field(None, ge=0)
    location: str | None = None


class InventoryItemSchema(BaseModel):
    id: str | None
    name: str
    category: str
    quantity: int
    purchase_price: float
    location: str | None = None
    status: StockStatus
    value: float


class OrderCreateSchema(BaseModel):
    supplier: str = Field(min_length=1)
    total: float = Field(ge=0)
    date: datetime | None = None
    status: OrderStatus = OrderStatus.PENDING


class OrderUpdateSchema(BaseModel):
    supplier: str | None = None
    total: float | None = Field(None, ge=0)
    date: datetime | None = None


class OrderStatusUpdateSchema(BaseModel):
    status: OrderStatus


class OrderSchema(BaseModel):
    id: str | None
    supplier: str
    date: str
    status: OrderStatus
    total: float


class StaffCreateSchema(BaseModel):
    name: str = Field(min_length=1)


class StaffSchema(BaseModel):
    id: str | None
    name: str


class PreferencesSchema(BaseModel):
    currency_symbol: str
    theme: str


class PreferencesUpdateSchema(BaseModel):
    currency_symbol: str | None = None
    theme: str | None = None


class ClearDataResponseSchema(BaseModel):
    deleted: dict[str, int]
