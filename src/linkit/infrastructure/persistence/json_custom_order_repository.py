"""JSON-file-backed implementation of CustomOrderRepository."""

from __future__ import annotations

from decimal import Decimal

from linkit.domain.model.custom_order import (
    CompanyInfo,
    CustomerResponse,
    CustomOrder,
    CustomPricing,
    OrderDetails,
)
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.model.value_objects import Money
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
)


class JsonCustomOrderRepository(JsonFileStore[CustomOrder], CustomOrderRepository):

    def next_id(self) -> int:
        return self._next_int_id()

    def save(self, order: CustomOrder) -> None:
        self._save_versioned(order, self.next_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: CustomOrder) -> dict:
        pricing = order.custom_pricing
        response = order.customer_response
        return {
            "id": order.id,
            "version": order.version,
            "companyInfo": {
                "companyName": order.company_info.company_name,
                "contactPerson": order.company_info.contact_person,
                "email": order.company_info.email,
                "phone": order.company_info.phone,
            },
            "orderDetails": {
                "employeeCount": order.order_details.employee_count,
                "message": order.order_details.message,
            },
            "status": order.status.value,
            "selectedPackage": order.selected_package_id,
            "customPricing": (
                {
                    "pricePerCard": str(pricing.price_per_card.amount),
                    "totalPrice": str(pricing.total_price.amount),
                    "currency": pricing.total_price.currency,
                    "isCustom": pricing.is_custom,
                }
                if pricing
                else None
            ),
            "adminNotes": order.admin_notes,
            "customerResponse": (
                {
                    "approved": response.approved,
                    "responseDate": dt_to_raw(response.response_date),
                    "customerNotes": response.customer_notes,
                }
                if response
                else None
            ),
            "createdBy": order.created_by,
            "handledBy": order.handled_by,
            "estimatedDelivery": dt_to_raw(order.estimated_delivery),
            "quotedAt": dt_to_raw(order.quoted_at),
            "approvedAt": dt_to_raw(order.approved_at),
            "completedAt": dt_to_raw(order.completed_at),
            "createdAt": dt_to_raw(order.created_at),
            "updatedAt": dt_to_raw(order.updated_at),
            "isDeleted": order.is_deleted,
            "deletedAt": dt_to_raw(order.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CustomOrder:
        pricing = None
        if raw.get("customPricing"):
            cp = raw["customPricing"]
            pricing = CustomPricing(
                price_per_card=Money(Decimal(cp["pricePerCard"]), cp["currency"]),
                total_price=Money(Decimal(cp["totalPrice"]), cp["currency"]),
                is_custom=cp.get("isCustom", True),
            )
        response = None
        if raw.get("customerResponse"):
            cr = raw["customerResponse"]
            response = CustomerResponse(
                approved=cr["approved"],
                response_date=dt_from_raw(cr["responseDate"]),
                customer_notes=cr.get("customerNotes", ""),
            )

        info = raw["companyInfo"]
        details = raw["orderDetails"]
        return CustomOrder(
            id=raw["id"],
            version=raw.get("version", 0),
            company_info=CompanyInfo(
                company_name=info["companyName"],
                contact_person=info["contactPerson"],
                email=info["email"],
                phone=info["phone"],
            ),
            order_details=OrderDetails(
                employee_count=details["employeeCount"],
                message=details.get("message", ""),
            ),
            status=CustomOrderStatus(raw["status"]),
            selected_package_id=raw.get("selectedPackage"),
            custom_pricing=pricing,
            admin_notes=raw.get("adminNotes"),
            customer_response=response,
            created_by=raw.get("createdBy"),
            handled_by=raw.get("handledBy"),
            estimated_delivery=dt_from_raw(raw.get("estimatedDelivery")),
            quoted_at=dt_from_raw(raw.get("quotedAt")),
            approved_at=dt_from_raw(raw.get("approvedAt")),
            completed_at=dt_from_raw(raw.get("completedAt")),
            created_at=dt_from_raw(raw["createdAt"]),
            updated_at=dt_from_raw(raw["updatedAt"]),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
