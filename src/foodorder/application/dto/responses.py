from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MoneyResponse(BaseModel):
    amountCents: int
    currency: str


class FoodItemResponse(BaseModel):
    itemId: int
    name: str
    description: str
    category: str
    price: MoneyResponse
    available: bool


class MenuListResponse(BaseModel):
    items: list[FoodItemResponse] = Field(default_factory=list)


class OrderItemResponse(BaseModel):
    foodId: int
    foodName: str
    quantity: int
    unitPrice: MoneyResponse
    lineTotal: MoneyResponse


class OrderResponse(BaseModel):
    orderId: int
    customerName: str
    customerAddress: str
    customerPhone: str
    status: str
    items: list[OrderItemResponse] = Field(default_factory=list)
    total: MoneyResponse
    createdAt: datetime


class OrderListResponse(BaseModel):
    orders: list[OrderResponse] = Field(default_factory=list)
