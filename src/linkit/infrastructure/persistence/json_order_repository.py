"""JSON-file-backed implementation of OrderRepository.

Amounts are stored as decimal strings under the order's single
``currency`` so totals survive a round trip exactly.
"""

from __future__ import annotations

from decimal import Decimal

from linkit.domain.model.order import (
    CardDesign,
    DeliveryInfo,
    Order,
    OrderAddon,
    OrderStatus,
    PaymentMethod,
    PersonalInfo,
)
from linkit.domain.model.value_objects import Money
from linkit.domain.repository.order_repository import OrderRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
)


class JsonOrderRepository(JsonFileStore[Order], OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_int_id()

    def save(self, order: Order) -> None:
        self._save_versioned(order, self.next_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        personal = order.personal_info
        design = order.card_design
        delivery = order.delivery_info
        return {
            "id": order.id,
            "version": order.version,
            "product": order.product_id,
            "productTitle": order.product_title,
            "personalInfo": {
                "firstName": personal.first_name,
                "lastName": personal.last_name,
                "position": personal.position,
                "organization": personal.organization,
                "phoneNumbers": list(personal.phone_numbers),
                "email": personal.email,
                "businessEmail": personal.business_email,
                "linkedinUrl": personal.linkedin_url,
                "instagramUrl": personal.instagram_url,
            },
            "cardDesign": {
                "nameOnCard": design.name_on_card,
                "color": design.color,
                "colorName": design.color_name,
                "includePrintedLogo": design.include_printed_logo,
                "companyLogo": design.company_logo,
            },
            "deliveryInfo": {
                "country": delivery.country_id,
                "city": delivery.city_id,
                "countryName": delivery.country_name,
                "cityName": delivery.city_name,
                "addressLine1": delivery.address_line1,
                "addressLine2": delivery.address_line2,
                "postcode": delivery.postcode,
                "useSameContact": delivery.use_same_contact,
                "deliveryPhone": delivery.delivery_phone,
                "deliveryEmail": delivery.delivery_email,
            },
            "addons": [
                {
                    "addon": a.addon_id,
                    "title": a.title,
                    "price": str(a.price.amount),
                    "value": a.value,
                }
                for a in order.addons
            ],
            "addonImages": list(order.addon_images),
            "currency": order.total.currency,
            "productPrice": str(order.product_price.amount),
            "deliveryFee": str(order.delivery_fee.amount),
            "logoSurcharge": str(order.logo_surcharge.amount),
            "addonsTotal": str(order.addons_total.amount),
            "total": str(order.total.amount),
            "finalTotal": str(order.final_total.amount),
            "paymentMethod": order.payment_method.value,
            "depositTransactionImg": order.deposit_transaction_img,
            "status": order.status.value,
            "estimatedDelivery": dt_to_raw(order.estimated_delivery),
            "printingDate": dt_to_raw(order.printing_date),
            "shippingDate": dt_to_raw(order.shipping_date),
            "deliveryDate": dt_to_raw(order.delivery_date),
            "notes": order.notes,
            "createdBy": order.created_by,
            "createdAt": dt_to_raw(order.created_at),
            "updatedAt": dt_to_raw(order.updated_at),
            "isDeleted": order.is_deleted,
            "deletedAt": dt_to_raw(order.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw["currency"]

        def money(key: str) -> Money:
            return Money(Decimal(raw[key]), currency)

        p = raw["personalInfo"]
        d = raw["cardDesign"]
        di = raw["deliveryInfo"]
        return Order(
            id=raw["id"],
            version=raw.get("version", 0),
            product_id=raw["product"],
            product_title=raw["productTitle"],
            personal_info=PersonalInfo(
                first_name=p["firstName"],
                last_name=p["lastName"],
                position=p["position"],
                organization=p["organization"],
                phone_numbers=tuple(p["phoneNumbers"]),
                email=p["email"],
                business_email=p.get("businessEmail"),
                linkedin_url=p.get("linkedinUrl"),
                instagram_url=p.get("instagramUrl"),
            ),
            card_design=CardDesign(
                name_on_card=d["nameOnCard"],
                color=d["color"],
                color_name=d["colorName"],
                include_printed_logo=d.get("includePrintedLogo", False),
                company_logo=d.get("companyLogo"),
            ),
            delivery_info=DeliveryInfo(
                country_id=di["country"],
                city_id=di["city"],
                country_name=di.get("countryName", ""),
                city_name=di.get("cityName", ""),
                address_line1=di["addressLine1"],
                address_line2=di.get("addressLine2", ""),
                postcode=di.get("postcode", ""),
                use_same_contact=di.get("useSameContact", True),
                delivery_phone=di.get("deliveryPhone", ""),
                delivery_email=di.get("deliveryEmail", ""),
            ),
            addons=[
                OrderAddon(
                    addon_id=a["addon"],
                    title=a["title"],
                    price=Money(Decimal(a["price"]), currency),
                    value=a.get("value"),
                )
                for a in raw.get("addons", [])
            ],
            addon_images=list(raw.get("addonImages", [])),
            product_price=money("productPrice"),
            delivery_fee=money("deliveryFee"),
            logo_surcharge=money("logoSurcharge"),
            addons_total=money("addonsTotal"),
            total=money("total"),
            final_total=money("finalTotal"),
            payment_method=PaymentMethod(raw.get("paymentMethod", "cash")),
            deposit_transaction_img=raw.get("depositTransactionImg"),
            status=OrderStatus(raw["status"]),
            estimated_delivery=dt_from_raw(raw.get("estimatedDelivery")),
            printing_date=dt_from_raw(raw.get("printingDate")),
            shipping_date=dt_from_raw(raw.get("shippingDate")),
            delivery_date=dt_from_raw(raw.get("deliveryDate")),
            notes=raw.get("notes"),
            created_by=raw.get("createdBy"),
            created_at=dt_from_raw(raw["createdAt"]),
            updated_at=dt_from_raw(raw["updatedAt"]),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
